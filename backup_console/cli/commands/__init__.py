"""
The db:* console commands
"""

from backup_console.cli.commands.db_backup import DbBackupCommand
from backup_console.cli.commands.db_list import DbListCommand
from backup_console.cli.commands.db_restore import DbRestoreCommand

COMMANDS = [DbBackupCommand, DbRestoreCommand, DbListCommand]

__all__ = ['COMMANDS', 'DbBackupCommand', 'DbListCommand', 'DbRestoreCommand']
