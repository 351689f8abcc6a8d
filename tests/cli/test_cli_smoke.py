# topmark:header:start
#
#   project      : Au
#   file         : test_cli_smoke.py
#   file_relpath : tests/cli/test_cli_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests for Au.

Provides minimal coverage that the CLI entry point is callable and that
`--help`, `version` and the shared flags behave.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from aulang.constants import AU_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_cli_entry() -> None:
    """It should show usage information and exit code SUCCESS when `--help` is passed."""
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)

    assert "Usage" in result.output
    for command in ("build", "check", "tr", "version"):
        assert command in result.output


@mark_cli
def test_version() -> None:
    """It should print the installed version."""
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)

    assert result.output.strip() == AU_VERSION


@mark_cli
def test_version_verbose() -> None:
    """``-v`` adds a heading."""
    result: Result = run_cli(["-v", "--no-color", "version"])

    assert_SUCCESS(result)

    assert result.output.splitlines() == ["Au version:", f"    {AU_VERSION}"]


@mark_cli
def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    """Passing both ``-v`` and ``-q`` is a usage error."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)

    assert "mutually exclusive" in result.output


@mark_cli
def test_build_help() -> None:
    """Subcommands have their own help."""
    result: Result = run_cli(["build", "--help"])

    assert_SUCCESS(result)

    assert "--dry-run" in result.output
