from boulder.frontend.app import main

main()
