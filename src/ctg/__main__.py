from ctg.main import main

main()
