from repbench.cli import main

main()
