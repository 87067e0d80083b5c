"""
Terminal I/O for the interactive commands

Informational lines are green, highlighted values yellow, and questions
are read one line at a time. Questions with a known set of answers get
tab completion through prompt_toolkit.
"""

import sys
from typing import List, Optional, Sequence, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.formatted_text import ANSI


class Console:
    """Reads answers from the user and writes command output"""

    COLORS = {
        'RESET': '\033[0m',
        'GREEN': '\033[32m',
        'YELLOW': '\033[33m',
        'RED': '\033[31m',
    }

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        use_color: Optional[bool] = None
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        if use_color is None:
            use_color = self.stdout.isatty()
        self.use_color = use_color

    def _color(self, text: str, color: str) -> str:
        """Add color to text"""
        if not self.use_color:
            return text
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['RESET']}"

    def _interactive(self) -> bool:
        return self.stdin is sys.stdin and self.stdin.isatty()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def line(self, text: str = '') -> None:
        print(text, file=self.stdout)

    def info(self, text: str) -> None:
        self.line(self._color(text, 'GREEN'))

    def error(self, text: str) -> None:
        self.line(self._color(text, 'RED'))

    def comment(self, text: str) -> str:
        """Highlight a value embedded in an info line."""
        if not self.use_color:
            return text
        # Resume green after the highlighted value
        return f"{self.COLORS['YELLOW']}{text}{self.COLORS['GREEN']}"

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        """Print rows as an ASCII table with a header line"""
        self.line(format_table(headers, rows))

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def ask(self, question: str) -> str:
        """Ask a free-form question; returns the stripped answer."""
        return self._read(self._question(question))

    def ask_with_completion(self, question: str, choices: Sequence[str]) -> str:
        """Ask a question offering tab completion over choices."""
        if self._interactive():
            session = PromptSession()
            completer = WordCompleter(list(choices), sentence=True)
            return session.prompt(ANSI(self._question(question)), completer=completer).strip()
        return self._read(self._question(question))

    def confirm(self, question: str, default: bool = True) -> bool:
        """Ask a yes/no question; an empty answer picks the default."""
        answer = self._read(self._question(question)).lower()
        if not answer:
            return default
        return answer in ('y', 'yes')

    def _question(self, question: str) -> str:
        if self.use_color:
            question += self.COLORS['RESET']
        return f"{question} "

    def _read(self, prompt: str) -> str:
        if self._interactive():
            return input(prompt).strip()

        self.stdout.write(prompt)
        self.stdout.flush()
        answer = self.stdin.readline()
        if not answer:
            raise EOFError("No more input while waiting for an answer")
        return answer.strip()


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """
    Format rows as an ASCII table.

    Args:
        headers: Column titles
        rows: Sequences of cell values, one per column

    Returns:
        Formatted table string
    """
    widths: List[int] = [len(h) for h in headers]
    for row in rows:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(str(value)))

    border = '+' + '+'.join('-' * (w + 2) for w in widths) + '+'

    def render(cells: Sequence[str]) -> str:
        return '| ' + ' | '.join(f"{str(c):<{widths[i]}}" for i, c in enumerate(cells)) + ' |'

    lines = [border, render(headers), border]
    lines.extend(render(row) for row in rows)
    lines.append(border)
    return '\n'.join(lines)
