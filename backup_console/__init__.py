"""
backup-manager-console

Interactive db:backup, db:restore and db:list commands on top of an
external backup engine.
"""

from backup_console.config import VERSION as __version__

__all__ = ['__version__']
