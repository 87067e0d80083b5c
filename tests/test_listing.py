#!/usr/bin/env python3
"""
Test listing helpers: byte humanization, timestamps and table rows
"""

import re
import time

import pytest

from backup_console.listing import FileEntry, file_names, format_bytes, format_timestamp, table_row

# 2014-05-15 12:00 UTC: two-digit day in every timezone
MID_MONTH = 1400155200
# 2014-05-05 12:00 UTC
EARLY_MONTH = 1399291200


@pytest.mark.parametrize('size, expected', [
    (0, '0 B'),
    (-10, '0 B'),
    (512, '512 B'),
    (1023, '1023 B'),
    (1024, '1 KB'),
    (1536, '1.5 KB'),
    (2048, '2 KB'),
    (1048576, '1 MB'),
    (1288490189, '1.2 GB'),
    (5 * 1024 ** 4, '5 TB'),
    (3 * 1024 ** 5, '3072 TB'),
])
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected


def test_format_bytes_rounds_to_precision():
    assert format_bytes(1100) == '1.07 KB'
    assert format_bytes(1100, precision=1) == '1.1 KB'


def test_format_timestamp_matches_local_time():
    expected = time.strftime('%a %d %Y  %H:%M:%S', time.localtime(MID_MONTH))
    assert format_timestamp(MID_MONTH) == expected


def test_format_timestamp_does_not_pad_day():
    assert re.match(r'^[A-Z][a-z]{2} [456] 2014  \d{2}:\d{2}:\d{2}$', format_timestamp(EARLY_MONTH))


def test_directory_row():
    entry = FileEntry.from_listing({'type': 'dir', 'basename': 'daily', 'timestamp': MID_MONTH, 'size': 4096})

    assert table_row(entry) == ['daily/', '', '0 B', format_timestamp(MID_MONTH)]


def test_file_row():
    entry = FileEntry.from_listing({
        'type': 'file',
        'basename': 'dump.sql',
        'extension': 'sql',
        'size': 2048,
        'timestamp': MID_MONTH,
    })

    assert table_row(entry) == ['dump.sql', 'sql', '2 KB', format_timestamp(MID_MONTH)]


def test_from_listing_tolerates_missing_keys():
    entry = FileEntry.from_listing({'type': 'file', 'path': 'backups/raw'})

    assert entry.basename == 'backups/raw'
    assert entry.extension == ''
    assert entry.size == 0
    assert entry.timestamp == 0


def test_file_names_skip_directories():
    entries = [
        FileEntry(kind='file', basename='a.sql', extension='sql', size=1),
        FileEntry(kind='dir', basename='archive'),
        FileEntry(kind='file', basename='b.sql.gz', extension='gz', size=2),
    ]

    assert file_names(entries) == ['a.sql', 'b.sql.gz']
