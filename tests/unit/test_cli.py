"""
Unit tests for the hashext CLI.

Tests use Click's CliRunner with a HashextContext built for a temp dir.
"""

import warnings
from pathlib import Path

import pytest
from click.testing import CliRunner

from hashext.cli import cli
from hashext.cli.context import HashextContext
from hashext.core.settings import load_settings

FOX = "The quick brown fox jumps over the lazy dog"
FOX_SHA256 = "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_ctx(tmp_path: Path):
    """Build a HashextContext with optional settings overrides."""

    def _make(**overrides) -> HashextContext:
        settings = load_settings(start_dir=str(tmp_path), **overrides)
        return HashextContext(cwd=tmp_path, settings=settings)

    return _make


class TestDigestCommand:
    def test_text(self, runner, make_ctx):
        result = runner.invoke(cli, ["digest", "-a", "MD5", "--text", "abc"], obj=make_ctx())
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "900150983cd24fb0d6963f7d28e17f72"

    def test_default_algorithm_from_settings(self, runner, make_ctx):
        ctx = make_ctx(hash={"default_algorithm": "SHA1"})
        result = runner.invoke(cli, ["digest", "--text", FOX], obj=ctx)
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"

    def test_files(self, runner, make_ctx, tmp_path: Path):
        empty = tmp_path / "empty.bin"
        empty.write_bytes(b"")
        fox = tmp_path / "fox.txt"
        fox.write_bytes(FOX.encode())

        result = runner.invoke(cli, ["digest", "-a", "MD4", str(empty), str(fox)], obj=make_ctx())

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            f"31d6cfe0d16ae931b73c59d7e0c089c0  {empty}",
            f"1bee69a46ba811185c194762abaeae90  {fox}",
        ]

    def test_stdin(self, runner, make_ctx):
        result = runner.invoke(cli, ["digest", "-a", "MD2"], input=b"", obj=make_ctx())
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "8350e5a3e24c153df2275c9f80692773  -"

    def test_stdin_without_deprecation_warning(self, runner, make_ctx):
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            result = runner.invoke(cli, ["digest", "-a", "MD5"], input=b"abc", obj=make_ctx())
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "900150983cd24fb0d6963f7d28e17f72  -"

    def test_lowercase_algorithm_is_usage_error(self, runner, make_ctx):
        result = runner.invoke(cli, ["digest", "-a", "md5", "--text", "abc"], obj=make_ctx())
        assert result.exit_code == 2

    def test_encoding_failure(self, runner, make_ctx):
        ctx = make_ctx(hash={"encoding": "ascii"})
        result = runner.invoke(cli, ["digest", "--text", "naïve"], obj=ctx)
        assert result.exit_code == 1
        assert "not representable in ascii" in result.output

    def test_text_and_files_conflict(self, runner, make_ctx, tmp_path: Path):
        path = tmp_path / "f"
        path.write_bytes(b"x")
        result = runner.invoke(cli, ["digest", "--text", "x", str(path)], obj=make_ctx())
        assert result.exit_code == 2


class TestVerifyCommand:
    def test_ok(self, runner, make_ctx, tmp_path: Path):
        path = tmp_path / "fox.txt"
        path.write_bytes(FOX.encode())
        result = runner.invoke(
            cli,
            ["verify", "-a", "SHA256", FOX_SHA256.upper(), str(path)],
            obj=make_ctx(),
        )
        assert result.exit_code == 0, result.output
        assert f"{path}: OK" in result.output

    def test_mismatch(self, runner, make_ctx, tmp_path: Path):
        path = tmp_path / "fox.txt"
        path.write_bytes(b"tampered")
        result = runner.invoke(
            cli,
            ["verify", "-a", "MD5", "9e107d9d372bb6826bd81d3542a419d6", str(path)],
            obj=make_ctx(),
        )
        assert result.exit_code == 1
        assert "FAILED" in result.output


class TestAlgorithmsCommand:
    def test_lists_all_with_lengths(self, runner):
        result = runner.invoke(cli, ["algorithms"], obj=object())
        assert result.exit_code == 0, result.output
        rows = [line.split() for line in result.output.splitlines()]
        assert rows == [
            ["MD2", "16"],
            ["MD4", "16"],
            ["MD5", "16"],
            ["SHA1", "20"],
            ["SHA224", "28"],
            ["SHA256", "32"],
            ["SHA384", "48"],
            ["SHA512", "64"],
        ]


class TestGroup:
    def test_help_without_command(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "digest" in result.output

    def test_context_created_from_cwd(self, runner, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".hashext").mkdir()
        (tmp_path / ".hashext" / "config.toml").write_text('[hash]\ndefault_algorithm = "MD5"\n')

        result = runner.invoke(cli, ["digest", "--text", "abc"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "900150983cd24fb0d6963f7d28e17f72"
