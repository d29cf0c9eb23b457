from oktagon.cli import main

main()
