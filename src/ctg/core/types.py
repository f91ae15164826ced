"""Shared type aliases for the core and domain layers."""
from typing import Literal

Direction = Literal[1, -1]
RollContext = Literal["roll_all", "roll_npc", "roll"]

__all__ = ["Direction", "RollContext"]
