from yggdrasilctl.cli import main

main()
