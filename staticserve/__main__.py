from staticserve.main import main

main()
