from scrabbler.cli import main

main()
