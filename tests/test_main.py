import logging
import os
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path

import pytest

from singledash.__main__ import find_singledash_config, get_demo_parser, main, run

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def isolated_cwd(monkeypatch):
    """Run each test from an empty working directory."""
    temp_dir = Path(tempfile.mkdtemp())
    monkeypatch.chdir(temp_dir)
    monkeypatch.delenv("SINGLEDASH_CONFIG", raising=False)
    monkeypatch.delenv("SINGLEDASH_LOG_FILE", raising=False)
    monkeypatch.setenv("SINGLEDASH_LOG_MODE", "cli")
    yield temp_dir
    logging.getLogger().handlers.clear()
    shutil.rmtree(temp_dir, ignore_errors=True)


def test_find_config_in_cwd(isolated_cwd):
    config_file = isolated_cwd / "singledash.toml"
    config_file.touch()
    assert find_singledash_config() == config_file


def test_find_config_from_env(isolated_cwd, monkeypatch):
    config_file = isolated_cwd / "nested" / "args.yaml"
    config_file.parent.mkdir()
    config_file.touch()
    monkeypatch.setenv("SINGLEDASH_CONFIG", str(config_file))
    assert find_singledash_config() == config_file


def test_find_config_none():
    assert find_singledash_config() is None


def test_demo_parser_declarations():
    parser = get_demo_parser()
    assert [arg.name for arg in parser.arguments] == [
        "headless",
        "lang",
        "translator",
        "driverpath",
        "verbose",
    ]
    assert parser.find("path").name == "driverpath"
    assert parser.find_value_argument("driverpath").required is True


def test_main_resolves_demo_arguments(capsys):
    resolved = run(["-path", "driver.exe", "-headless", "FALSE", "-language", "de:en"])
    assert resolved == {
        "headless": False,
        "driverpath": Path("driver.exe"),
        "lang": "de:en",
        "translator": "deepl",
        "verbose": False,
    }
    assert capsys.readouterr().out == ""


def test_main_verbose_prints_table(capsys):
    run(["-driverpath", "driver.exe", "-verbose"])
    out = capsys.readouterr().out
    assert "Resolved arguments" in out
    assert "translator" in out


def test_main_missing_required_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run([])
    assert excinfo.value.code == 1
    assert "This Argument is required." in capsys.readouterr().out


def test_main_invalid_boolean_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(["-driverpath", "driver.exe", "-headless", "yes"])
    assert excinfo.value.code == 1
    assert "is not a Boolean" in capsys.readouterr().out


def test_main_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(["-help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: singledash [OPTIONS]")
    assert "-driverpath <Value>" in out


def test_main_with_config(isolated_cwd, capsys):
    (isolated_cwd / "singledash.yaml").write_text(
        "program: translate\n"
        "arguments:\n"
        "  - name: lang\n"
        "    default: en:de\n"
        "  - name: verbose\n"
        "    kind: flag\n"
    )
    resolved = run(["-lang", "fr:it"])
    assert resolved == {"lang": "fr:it"}
    assert "Resolved arguments" in capsys.readouterr().out


def test_main_returns_none(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["singledash", "-driverpath", "driver.exe"])
    assert main() is None


def test_main_with_config_missing_required_without_exit(isolated_cwd, capsys):
    (isolated_cwd / "singledash.yaml").write_text(
        "exit_on_missing: false\n"
        "arguments:\n"
        "  - name: driverpath\n"
        "    default: driver.exe\n"
        "    required: true\n"
    )
    with pytest.raises(SystemExit) as excinfo:
        run([])
    assert excinfo.value.code == 1
    assert "Missing required value for '-driverpath'" in capsys.readouterr().out


def test_module_run_exits_zero(isolated_cwd):
    env = dict(os.environ, PYTHONPATH=str(PROJECT_ROOT))
    result = subprocess.run(
        [sys.executable, "-m", "singledash", "-driverpath", "driver.exe"],
        capture_output=True,
        text=True,
        cwd=isolated_cwd,
        env=env,
        check=False,
    )
    assert result.returncode == 0
    assert result.stderr == ""
