#!/usr/bin/env python3
"""
backup-manager entry point

Registers the db:* commands, boots the service provider and executes
the requested command.
"""
import sys
from pathlib import Path
from typing import Optional

from backup_console import config
from backup_console.cli.commands import COMMANDS
from backup_console.cli.core import BackupManagerCLI
from backup_console.container import Container
from backup_console.exceptions import ConfigError
from backup_console.logger import setup_logging
from backup_console.provider import BackupManagerServiceProvider


def build_cli(container: Container) -> BackupManagerCLI:
    """Create the router with one subcommand per db:* command."""
    cli = BackupManagerCLI()

    for command_cls in COMMANDS:
        def handler(args, name=command_cls.name):
            return container.make(f'command.{name}').run(args)

        parser = cli.register_command(command_cls.name, handler, help_text=command_cls.description)
        command_cls.configure(parser)

    return cli


def main(argv: Optional[list] = None, container: Optional[Container] = None):
    """Main CLI entry point"""
    container = container or Container()
    cli = build_cli(container)
    args = cli.parse(argv)

    setup_logging(
        level=config.LOG_LEVEL,
        log_file=Path(config.LOG_FILE).expanduser() if config.LOG_FILE else None,
        verbose=args.verbose
    )

    try:
        app_config = config.load_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    BackupManagerServiceProvider(container, app_config).register()

    exit_code = cli.execute(args=args)
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
