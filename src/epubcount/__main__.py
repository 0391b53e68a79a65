from epubcount.cli import main

main()
