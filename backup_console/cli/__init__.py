"""
Command-line interface for backup-manager-console

The router lives in `core`, terminal I/O in `console`, the db:* commands
in `commands` and the entry point in `app`.
"""
