#!/usr/bin/env python3
"""
End-to-end tests: argv -> service provider -> command -> engine doubles
"""

import pytest
import yaml

from backup_console.cli.app import build_cli, main
from backup_console.container import Container
from backup_console.listing import format_timestamp

T1 = 1400155200
T2 = 1400241600


def run(argv, console):
    container = Container()
    container.instance('console', console)
    with pytest.raises(SystemExit) as exc_info:
        main(argv, container)
    return exc_info.value.code


def test_list_prints_table(config_file, engine, scripted_console):
    engine.MemoryFilesystem.LISTINGS[('/var/backups/', '/backups')] = [
        {'type': 'dir', 'basename': 'daily', 'timestamp': T1},
        {'type': 'file', 'basename': 'dump.sql', 'extension': 'sql', 'size': 2048, 'timestamp': T2},
    ]
    console = scripted_console()

    code = run(['db:list', '--source=local', '--path=/backups'], console)

    assert code == 0
    lines = console.output.splitlines()
    width = len(format_timestamp(T1))
    assert f"| {'Name':<8} | Extension | Size | {'Created':<{width}} |" in lines
    assert f"| {'daily/':<8} | {'':<9} | {'0 B':<4} | {format_timestamp(T1)} |" in lines
    assert f"| {'dump.sql':<8} | {'sql':<9} | {'2 KB':<4} | {format_timestamp(T2)} |" in lines


def test_backup_through_cli(config_file, engine, scripted_console):
    console = scripted_console('production', 'y')

    code = run(['db:backup', '--destination', 'local', '--destinationPath', 'app.sql',
                '--compression', 'gzip'], console)

    assert code == 0
    assert engine.BackupProcedure.CALLS == [('production', 'local', 'app.sql', 'gzip')]
    assert 'Available database connections: production, analytics' in console.output


def test_restore_through_cli(config_file, engine, scripted_console):
    engine.MemoryFilesystem.LISTINGS[('nightly/', 'db')] = [
        {'type': 'file', 'basename': 'app.sql.gz', 'extension': 'gz', 'size': 10, 'timestamp': T1},
    ]
    console = scripted_console('db', 'app.sql.gz', 'y')

    code = run(['db:restore', '--source=s3', '--database=analytics', '--compression=gzip'], console)

    assert code == 0
    assert engine.RestoreProcedure.CALLS == [('s3', 'db/app.sql.gz', 'analytics', 'gzip')]


def test_engine_error_exits_non_zero(config_file, config_data, engine, scripted_console, capsys):
    config_data['engine']['backup_procedure'] = 'engine_doubles:FailingBackupProcedure'
    config_file.write_text(yaml.safe_dump(config_data, sort_keys=False))

    code = run(['db:backup', '--database=production', '--destination=local',
                '--destinationPath=a.sql', '--compression=gzip'], scripted_console())

    assert code == 1
    assert "Error: Access denied for connection 'production'" in capsys.readouterr().err


def test_user_aborted_exits_non_zero(config_file, engine, scripted_console, monkeypatch, capsys):
    monkeypatch.setenv('BACKUP_MANAGER_MAX_RETRIES', '0')
    console = scripted_console('archive', 'n')

    code = run(['db:list', '--source=local'], console)

    assert code == 1
    assert 'Confirmation declined 1 time(s)' in capsys.readouterr().err


def test_input_closed_mid_wizard(config_file, engine, scripted_console, capsys):
    code = run(['db:list'], scripted_console())

    assert code == 1
    assert 'Input closed' in capsys.readouterr().err


def test_missing_config_file(tmp_path, monkeypatch, scripted_console, capsys):
    monkeypatch.setenv('BACKUP_MANAGER_CONFIG', str(tmp_path / 'absent.yml'))

    code = run(['db:list', '--source=local', '--path=/'], scripted_console())

    assert code == 1
    assert 'Config file not found' in capsys.readouterr().err


def test_commands_registered_with_options():
    cli = build_cli(Container())

    args = cli.parse(['db:restore', '--sourcePath', 'a/b.sql'])

    assert set(cli.commands) == {'db:backup', 'db:restore', 'db:list'}
    assert args.sourcePath == 'a/b.sql'
    assert args.source is None


def test_invalid_wizard_setting_in_config_file(config_file, config_data, scripted_console, capsys):
    config_data['wizard'] = {'max_retries': 'three'}
    config_file.write_text(yaml.safe_dump(config_data, sort_keys=False))

    code = run(['db:list', '--source=local', '--path=/'], scripted_console())

    assert code == 1
    assert "Error: wizard.max_retries must be an integer, got 'three'" in capsys.readouterr().err
