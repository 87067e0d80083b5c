from backup_console.cli.app import main

main()
