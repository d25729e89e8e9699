from domino_tiling import main

main()
