from codecollector.cli import main

main()
