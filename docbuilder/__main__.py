from docbuilder.cli import main

main()
