#!/usr/bin/env python3
"""
Pytest configuration and shared fixtures for backup-manager-console tests

Provides a scripted console, in-memory engine registries and a
temporary host configuration file.
"""

import io
import sys
from pathlib import Path
from typing import Callable, List, Sequence

import pytest
import yaml

# Make engine_doubles importable by dotted engine paths
sys.path.insert(0, str(Path(__file__).parent))

import engine_doubles
from backup_console.cli.console import Console


# ============================================================================
# Console Fixtures
# ============================================================================

class ScriptedConsole(Console):
    """Console answering questions from a fixed script and recording prompts"""

    def __init__(self, answers: Sequence[str]):
        super().__init__(
            stdin=io.StringIO(''.join(f"{answer}\n" for answer in answers)),
            stdout=io.StringIO(),
            use_color=False
        )
        self.questions: List[str] = []
        self.offered: List[List[str]] = []
        self.confirmations = 0

    def ask(self, question: str) -> str:
        self.questions.append(question)
        return super().ask(question)

    def ask_with_completion(self, question: str, choices: Sequence[str]) -> str:
        self.questions.append(question)
        self.offered.append(list(choices))
        return super().ask_with_completion(question, choices)

    def confirm(self, question: str, default: bool = True) -> bool:
        self.confirmations += 1
        return super().confirm(question, default)

    @property
    def output(self) -> str:
        return self.stdout.getvalue()


@pytest.fixture
def scripted_console() -> Callable[..., ScriptedConsole]:
    """Build a console that answers with the given lines, in order"""
    def build(*answers: str) -> ScriptedConsole:
        return ScriptedConsole(answers)
    return build


# ============================================================================
# Engine Fixtures
# ============================================================================

STORAGE = {
    'local': {'type': 'Local', 'root': '/var/backups/'},
    's3': {'type': 'AwsS3', 'root': 'nightly/'},
}

CONNECTIONS = {
    'production': {
        'driver': 'mysql',
        'host': 'db.internal',
        'username': 'app',
        'password': 'secret',
        'database': 'app',
    },
    'analytics': {
        'driver': 'pgsql',
        'host': 'pg.internal',
        'port': 6432,
        'username': 'reporter',
        'password': 'secret',
        'database': 'warehouse',
    },
    'cache': {
        'driver': 'sqlite',
        'database': '/tmp/cache.sqlite',
    },
}


@pytest.fixture
def engine():
    """The engine doubles module, with listings and recorded calls cleared"""
    engine_doubles.reset()
    yield engine_doubles
    engine_doubles.reset()


@pytest.fixture
def filesystems(engine):
    return engine.FilesystemProvider(engine.Config(STORAGE))


@pytest.fixture
def databases(engine):
    return engine.DatabaseProvider(engine.Config({'production': {}, 'analytics': {}}))


@pytest.fixture
def compressors(engine):
    provider = engine.CompressorProvider()
    provider.add(engine.GzipCompressor())
    provider.add(engine.NullCompressor())
    return provider


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def config_data() -> dict:
    return {
        'storage': STORAGE,
        'database': {'connections': CONNECTIONS},
        'engine': dict(engine_doubles.ENGINE),
    }


@pytest.fixture
def config_file(tmp_path: Path, config_data: dict, monkeypatch) -> Path:
    """Write the host config as YAML and point BACKUP_MANAGER_CONFIG at it"""
    path = tmp_path / 'config.yml'
    path.write_text(yaml.safe_dump(config_data, sort_keys=False))
    monkeypatch.setenv('BACKUP_MANAGER_CONFIG', str(path))
    monkeypatch.delenv('BACKUP_MANAGER_MAX_RETRIES', raising=False)
    monkeypatch.delenv('BACKUP_MANAGER_STRICT_CHOICES', raising=False)
    return path
