from gurka.cli import main

main()
