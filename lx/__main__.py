from lx.cli import main

main()
