from autoui.cli.main import main

main()
