from chesstrainer.app import main

main()
