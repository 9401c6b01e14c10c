from extrema.main import main

main()
