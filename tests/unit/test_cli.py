"""Tests for CLI tool."""

from __future__ import annotations

import os
import subprocess
import sys

from bloomcodec import __version__


def _run(*args: str, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "bloomcodec.cli.main", *args],
        capture_output=True,
        text=True,
        env={**os.environ, **(env or {})},
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "bloomcodec: Compact Checklist Codec" in result.stdout
    assert "--inspect" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert f"bloomcodec {__version__}" in result.stdout


def test_cli_inspect() -> None:
    """Test CLI --inspect with a valid value."""
    result = _run("--inspect", "AWM")
    assert result.returncode == 0
    assert "Schema version" in result.stdout
    assert "Encoded slots" in result.stdout
    assert "collected" in result.stdout
    assert "Collected: 1/4 (25%)" in result.stdout


def test_cli_inspect_with_catalog_length() -> None:
    """Test CLI --inspect reconciling against a grown catalog."""
    result = _run("--inspect", "AWM", "--catalog-length", "6")
    assert result.returncode == 0
    assert "entries added since encoding" in result.stdout
    assert "Collected: 1/6" in result.stdout


def test_cli_inspect_catalog_length_from_env() -> None:
    """Test BLOOMCODEC_CATALOG_LENGTH sets the default catalog length."""
    result = _run("--inspect", "AWM", env={"BLOOMCODEC_CATALOG_LENGTH": "2"})
    assert result.returncode == 0
    assert "slots beyond catalog" in result.stdout
    assert "Collected: 1/2" in result.stdout


def test_cli_inspect_corrupt() -> None:
    """Test CLI --inspect with a corrupt value."""
    result = _run("--inspect", "not valid!")
    assert result.returncode == 1
    assert "Error" in result.stderr
    assert "alphabet" in result.stderr


def test_cli_inspect_unknown_version() -> None:
    """Test CLI --inspect with a value from an unknown schema version."""
    result = _run("--inspect", "zz")
    assert result.returncode == 1
    assert "Unknown schema version" in result.stderr


def test_cli_size() -> None:
    """Test CLI --size."""
    result = _run("--size", "174")
    assert result.returncode == 0
    assert "Blob: 45 bytes" in result.stdout
    assert "Text: 60 characters" in result.stdout


def test_cli_size_too_large() -> None:
    """Test CLI --size beyond the format ceiling."""
    result = _run("--size", "300")
    assert result.returncode == 1
    assert "exceeds the format limit" in result.stderr


def test_cli_bad_env() -> None:
    """Test CLI with an invalid environment setting."""
    result = _run("--size", "4", env={"BLOOMCODEC_LOG_LEVEL": "LOUD"})
    assert result.returncode == 1
    assert "log_level" in result.stderr


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "bloomcodec: Compact Checklist Codec" in result.stdout


def test_cli_size_exact_stdout() -> None:
    """Test CLI --size prints only the report, even with debug logging on."""
    result = _run("--size", "4", env={"BLOOMCODEC_LOG_LEVEL": "DEBUG"})
    assert result.returncode == 0
    assert result.stdout == (
        "=================== 4 entries ===================\n"
        f"        version byte{'.' * 26}8 bits\n"
        f"        statuses{'.' * 30}8 bits\n"
        f"        padding to full byte{'.' * 18}0 bits\n"
        "Payload: 1 bytes\n"
        "Blob: 2 bytes\n"
        "Text: 3 characters\n"
    )


def test_library_use_keeps_stdout_clean() -> None:
    """Test importing and decoding without configured logging writes nothing to stdout."""
    result = subprocess.run(
        [sys.executable, "-c", "import bloomcodec; bloomcodec.decode(b'\\x09', 3)"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert result.stdout == ""
    assert "corrupt_encoding_reset" in result.stderr
