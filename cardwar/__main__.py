from cardwar.cli import main

main()
