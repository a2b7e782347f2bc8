from chip8_web.main import main

main()
