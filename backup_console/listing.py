"""
Display helpers for storage listings
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List

TABLE_HEADERS = ['Name', 'Extension', 'Size', 'Created']

BYTE_UNITS = ['B', 'KB', 'MB', 'GB', 'TB']


@dataclass(frozen=True)
class FileEntry:
    """One entry of a storage directory listing"""

    kind: str
    basename: str
    extension: str = ''
    size: int = 0
    timestamp: int = 0

    @property
    def is_dir(self) -> bool:
        return self.kind == 'dir'

    @classmethod
    def from_listing(cls, item: Dict[str, Any]) -> 'FileEntry':
        """Build an entry from an engine listing dictionary."""
        kind = item.get('type', 'file')
        is_dir = kind == 'dir'
        return cls(
            kind=kind,
            basename=item.get('basename') or item.get('path', ''),
            extension='' if is_dir else item.get('extension', ''),
            size=0 if is_dir else int(item.get('size') or 0),
            timestamp=int(item.get('timestamp') or 0),
        )


def format_bytes(size: float, precision: int = 2) -> str:
    """
    Humanize a byte count, e.g. 1536 -> '1.5 KB'.

    Trailing zeros of the rounded value are dropped.
    """
    size = max(size, 0)
    power = 0
    while power < len(BYTE_UNITS) - 1 and size >= 1024 ** (power + 1):
        power += 1

    value = round(size / (1024 ** power), precision)
    text = f"{value:.{precision}f}".rstrip('0').rstrip('.') if precision else f"{value:.0f}"
    return f"{text} {BYTE_UNITS[power]}"


def format_timestamp(timestamp: float) -> str:
    """Render a Unix timestamp like 'Mon 6 2014  13:05:09' (local time)."""
    moment = datetime.fromtimestamp(timestamp)
    return f"{moment:%a} {moment.day} {moment:%Y  %H:%M:%S}"


def table_row(entry: FileEntry) -> List[str]:
    if entry.is_dir:
        return [f"{entry.basename}/", '', '0 B', format_timestamp(entry.timestamp)]
    return [
        entry.basename,
        entry.extension,
        format_bytes(entry.size),
        format_timestamp(entry.timestamp),
    ]


def table_rows(entries: Iterable[FileEntry]) -> List[List[str]]:
    return [table_row(entry) for entry in entries]


def file_names(entries: Iterable[FileEntry]) -> List[str]:
    """Basenames of the non-directory entries, in listing order."""
    return [entry.basename for entry in entries if not entry.is_dir]
