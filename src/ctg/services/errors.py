"""Service-layer exceptions and warnings."""


class InvalidModeError(Exception):
    """Raised when the requested grouping mode is not configured."""

    def __init__(self, mode: str) -> None:
        super().__init__(f"Invalid grouping mode: {mode!r}")
        self.mode = mode


class DuplicateModeError(Exception):
    """Raised when two configured modes share the same key."""


class GroupSkippingError(Exception):
    """Raised when group skipping is requested without at least two groups."""


class InvalidFormulaError(Exception):
    """Raised when an initiative dice formula cannot be parsed."""


class DuplicateMembershipWarning(UserWarning):
    """A combatant was listed in more than one external group."""


class MissingPathValueWarning(UserWarning):
    """Some combatants have no value at the grouping path."""
