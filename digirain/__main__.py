from digirain.main import main

main()
