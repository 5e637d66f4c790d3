from letscrate.main import main

main()
