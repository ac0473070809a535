from wirecross.cli import main

main()
