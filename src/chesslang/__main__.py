from chesslang.app import main

main()
