from yank.cli import main

main()
