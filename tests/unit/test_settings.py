"""
Tests for hashext configuration loading.

Tests verify:
- Defaults when no config file or environment is present
- TOML config from .hashext/config.toml and pyproject.toml [tool.hashext]
- Environment variables override TOML
- Invalid values surface as ConfigValidationError
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from hashext.core.exceptions import ConfigValidationError
from hashext.core.models import HashConfig
from hashext.core.settings import find_config_file, load_settings
from hashext.hashing import CANONICAL_NAMES


class TestDefaults:
    def test_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.hash.default_algorithm == "SHA256"
        assert settings.hash.encoding == "utf-8"
        assert settings.logging.level == "warning"
        assert settings.logging.console is False
        assert settings.logging.file is False
        assert settings.config_file is None
        assert settings.config_error is None

    def test_to_dict(self, tmp_path: Path) -> None:
        data = load_settings(start_dir=str(tmp_path)).to_dict()
        assert data == {
            "hash": {"default_algorithm": "SHA256", "encoding": "utf-8"},
            "logging": {"level": "warning", "console": False, "file": False},
        }


class TestTomlConfig:
    """Tests for TOML config discovery and loading."""

    def test_hashext_config_toml(self, tmp_path: Path) -> None:
        config_dir = tmp_path / ".hashext"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text(
            '[hash]\ndefault_algorithm = "MD5"\n\n[logging]\nlevel = "debug"\n'
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.hash.default_algorithm == "MD5"
        assert settings.logging.level == "debug"
        assert settings.config_file == str(config_dir / "config.toml")

    def test_pyproject_tool_section(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "x"\n\n[tool.hashext.hash]\nencoding = "latin-1"\n'
        )
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(str(nested)) == tmp_path / "pyproject.toml"
        settings = load_settings(start_dir=str(nested))
        assert settings.hash.encoding == "latin-1"

    def test_pyproject_without_section_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert find_config_file(str(tmp_path)) is None

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text('[hash]\ndefault_algorithm = "SHA1"\n')
        settings = load_settings(config_path=path)
        assert settings.hash.default_algorithm == "SHA1"

    def test_broken_toml_recorded_not_raised(self, tmp_path: Path) -> None:
        config_dir = tmp_path / ".hashext"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[hash\n")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.hash.default_algorithm == "SHA256"
        assert settings.config_error is not None
        assert "Failed to parse" in settings.config_error


class TestEnvironment:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_dir = tmp_path / ".hashext"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('[hash]\ndefault_algorithm = "MD5"\n')
        monkeypatch.setenv("HASHEXT_HASH__DEFAULT_ALGORITHM", "SHA512")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.hash.default_algorithm == "SHA512"

    def test_init_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HASHEXT_HASH__DEFAULT_ALGORITHM", "SHA512")
        settings = load_settings(start_dir=str(tmp_path), hash={"default_algorithm": "MD2"})
        assert settings.hash.default_algorithm == "MD2"

    def test_log_level_is_normalized(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HASHEXT_LOGGING__LEVEL", "DEBUG")
        assert load_settings(start_dir=str(tmp_path)).logging.level == "debug"


class TestValidation:
    def test_lowercase_algorithm_rejected(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Config uses the same exact canonical names as lookup()."""
        monkeypatch.setenv("HASHEXT_HASH__DEFAULT_ALGORITHM", "md5")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_settings(start_dir=str(tmp_path))
        assert exc_info.value.context["key"] == "hash.default_algorithm"

    def test_unknown_encoding_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError, match="Unknown text encoding"):
            load_settings(start_dir=str(tmp_path), hash={"encoding": "no-such-codec"})


class TestDefaultAlgorithmVocabulary:
    """default_algorithm accepts exactly the names lookup() resolves."""

    @pytest.mark.parametrize("name", CANONICAL_NAMES)
    def test_every_canonical_name_accepted(self, name: str) -> None:
        assert HashConfig(default_algorithm=name).default_algorithm == name

    @pytest.mark.parametrize("name", ["Invalid", "sha256", "SHA-256", ""])
    def test_non_canonical_rejected(self, name: str) -> None:
        with pytest.raises(ValidationError, match="Unknown hash algorithm"):
            HashConfig(default_algorithm=name)
