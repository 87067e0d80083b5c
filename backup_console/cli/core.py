"""
CLI core - argparse-based command routing and the base command class
"""
import argparse
import sys
from typing import Callable, Dict, List, Optional, Tuple

from backup_console.cli.console import Console
from backup_console.config import VERSION, WizardSettings
from backup_console.engine import StorageRegistry
from backup_console.listing import TABLE_HEADERS, FileEntry, table_rows
from backup_console.logger import get_logger
from backup_console.wizard import ArgumentWizard, ParameterSet, ParameterSpec, parameter_set

logger = get_logger(__name__)


class BackupManagerCLI:
    """
    Console kernel for the db:* commands.

    Routes parsed arguments to handlers and turns uncaught errors into
    exit codes.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="backup-manager",
            description="Back up, restore and list database dumps on configured storage",
            epilog="Use 'backup-manager <command> --help' for command-specific help"
        )
        self.parser.add_argument('--version', action='version', version=f'backup-manager-console {VERSION}')
        self.parser.add_argument('--debug', action='store_true', help='Print tracebacks on errors')
        self.parser.add_argument('-v', '--verbose', action='store_true', help='Log diagnostics to stderr')
        self.subparsers = self.parser.add_subparsers(dest="command", required=True)

        # Command registry: maps command names to handler functions
        self.commands: Dict[str, Callable] = {}

    def register_command(
        self,
        name: str,
        handler: Callable,
        help_text: str = "",
        **parser_kwargs
    ) -> argparse.ArgumentParser:
        """
        Register a command with its handler function.

        Args:
            name: Command name (e.g., 'db:backup')
            handler: Function to call with the parsed arguments
            help_text: Help text for the command
            **parser_kwargs: Additional arguments for add_parser()

        Returns:
            Subparser for this command (to add arguments)
        """
        self.commands[name] = handler
        return self.subparsers.add_parser(
            name,
            help=help_text,
            description=help_text,
            **parser_kwargs
        )

    def parse(self, argv: Optional[list] = None) -> argparse.Namespace:
        return self.parser.parse_args(argv)

    def execute(self, argv: Optional[list] = None, args: Optional[argparse.Namespace] = None) -> int:
        """
        Parse arguments and execute the appropriate command.

        Args:
            argv: Command-line arguments (default: sys.argv[1:])
            args: Already parsed arguments; skips parsing

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if args is None:
            args = self.parse(argv)

        handler = self.commands.get(args.command)
        if handler is None:
            self.parser.error(f"No handler registered for command: {args.command}")

        try:
            result = handler(args)
            return result if result is not None else 0

        except KeyboardInterrupt:
            print("\nInterrupted", file=sys.stderr)
            return 130
        except EOFError:
            print("\nInput closed before all questions were answered", file=sys.stderr)
            return 1
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            if getattr(args, 'debug', False):
                import traceback
                traceback.print_exc()
            return 1


class Command:
    """
    Base class for the interactive db:* commands.

    Subclasses declare their options and parameter specs; `run` fills the
    gaps through the wizard and hands the answers to `fire`.
    """

    name: str = ''
    description: str = ''
    # (option name, help text), in the order the wizard asks for them
    options: List[Tuple[str, str]] = []

    def __init__(self, console: Console, settings: Optional[WizardSettings] = None):
        self.console = console
        self.settings = settings or WizardSettings()

    @classmethod
    def configure(cls, parser: argparse.ArgumentParser) -> None:
        """Add the command's options to its subparser."""
        for option, help_text in cls.options:
            parser.add_argument(f'--{option}', dest=option, default=None, help=help_text)

    def parameters(self) -> List[ParameterSpec]:
        raise NotImplementedError

    def summary(self, values: ParameterSet) -> str:
        raise NotImplementedError

    def fire(self, values: ParameterSet) -> int:
        raise NotImplementedError

    def wizard(self) -> ArgumentWizard:
        return ArgumentWizard(
            self.console,
            self.parameters(),
            self.summary,
            max_retries=self.settings.max_retries,
            strict_choices=self.settings.strict_choices,
        )

    def run(self, args: argparse.Namespace) -> int:
        """Resolve missing options, then execute the command."""
        names = [option for option, _ in self.options]
        values = parameter_set(names, vars(args))
        values = self.wizard().resolve(values)
        result = self.fire(values)
        return result if result is not None else 0

    # ------------------------------------------------------------------
    # Helpers shared by the storage commands
    # ------------------------------------------------------------------
    def show_contents(self, entries: List[FileEntry]) -> None:
        self.console.table(TABLE_HEADERS, table_rows(entries))


def storage_root(filesystems: StorageRegistry, name: Optional[str]) -> str:
    """Root path configured for a storage destination, '' when unset."""
    if not name:
        return ''
    return filesystems.get_config(name, 'root') or ''


def list_entries(filesystems: StorageRegistry, source: str, path: str) -> List[FileEntry]:
    """List a directory on a storage destination."""
    contents = filesystems.get(source).list_contents(path)
    logger.debug(f"Listed {len(contents)} entries at {source}:{path}")
    return [FileEntry.from_listing(item) for item in contents]
