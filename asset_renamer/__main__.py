from asset_renamer.cli import main

main()
