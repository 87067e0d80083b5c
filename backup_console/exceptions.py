"""
Errors raised by the console layer itself.

Failures inside the backup engine (bad driver names, connection errors,
missing files) are not wrapped; they reach the CLI router untouched.
"""


class BackupConsoleError(RuntimeError):
    """Base class for errors raised by backup-manager-console."""


class ConfigError(BackupConsoleError):
    """Configuration file missing, unreadable or malformed."""


class BindingNotFound(BackupConsoleError):
    """A name was resolved from the container but never bound."""

    def __init__(self, name: str):
        super().__init__(f"Nothing is bound to '{name}' in the container")
        self.name = name


class EngineNotAvailable(BackupConsoleError):
    """An engine component could not be imported from its dotted path."""


class UserAborted(BackupConsoleError):
    """The user declined confirmation more often than allowed."""

    def __init__(self, attempts: int):
        super().__init__(f"Confirmation declined {attempts} time(s), giving up")
        self.attempts = attempts
