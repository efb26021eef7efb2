from react_scaffold.cli import main

main()
