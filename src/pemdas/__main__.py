from pemdas.cli import main

main()
