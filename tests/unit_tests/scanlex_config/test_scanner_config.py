"""
Unit tests for ScannerConfig loading.
"""
import logging

import pytest
from scanlex.config import config as config_module
from scanlex.config.config import (
    ENV_COMPARE_OPTIONS,
    ENV_INT_BITS,
    ENV_SKIP_WHITESPACE,
    ScannerConfig,
)
from scanlex.scanner.compare import CompareOptions


@pytest.fixture
def clean_env(monkeypatch):
    for name in (ENV_SKIP_WHITESPACE, ENV_COMPARE_OPTIONS, ENV_INT_BITS):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestScannerConfigDefaults:
    """Tests for constructor defaults and validation."""

    def test_defaults(self):
        config = ScannerConfig()
        assert config.skip_leading_whitespace is True
        assert config.compare_options == CompareOptions.LITERAL
        assert config.int_bits == 64
        assert config.int_range == range(-2 ** 63, 2 ** 63)

    def test_unbounded_int_range(self):
        assert ScannerConfig(int_bits=None).int_range is None

    def test_compare_options_from_string(self):
        config = ScannerConfig(compare_options="case_insensitive")
        assert config.compare_options == CompareOptions.CASE_INSENSITIVE

    @pytest.mark.parametrize("bits", [0, 1, -8, 2.5, True])
    def test_invalid_int_bits(self, bits):
        with pytest.raises(ValueError):
            ScannerConfig(int_bits=bits)

    @pytest.mark.parametrize("value", [1, 0, None, 2.5])
    def test_non_string_skip_whitespace(self, value):
        """Only real booleans and boolean words are accepted."""
        with pytest.raises(ValueError):
            ScannerConfig(skip_leading_whitespace=value)

    @pytest.mark.parametrize("value", [5, None, 1.0])
    def test_non_string_compare_options(self, value):
        with pytest.raises(ValueError):
            ScannerConfig(compare_options=value)

    def test_config_module_does_not_import_scanner_at_load(self):
        """CompareOptions is imported lazily, so config has no import-time tie to the scanner package."""
        assert "CompareOptions" not in vars(config_module)

    def test_dict_round_trip(self):
        config = ScannerConfig(
            skip_leading_whitespace=False,
            compare_options=CompareOptions.CASE_INSENSITIVE | CompareOptions.WIDTH_INSENSITIVE,
            int_bits=None,
        )
        data = config.to_dict()
        assert data == {
            "skip_leading_whitespace": False,
            "compare_options": "case_insensitive,width_insensitive",
            "int_bits": None,
        }
        restored = ScannerConfig.from_dict(data)
        assert restored.to_dict() == data

    def test_literal_to_dict(self):
        assert ScannerConfig().to_dict()["compare_options"] == "literal"


class TestScannerConfigFromEnv:
    """Tests for environment variable loading."""

    def test_from_env_defaults(self, clean_env):
        config = ScannerConfig.from_env()
        assert config.to_dict() == ScannerConfig().to_dict()

    def test_from_env_overrides(self, clean_env):
        clean_env.setenv(ENV_SKIP_WHITESPACE, "no")
        clean_env.setenv(ENV_COMPARE_OPTIONS, "case_insensitive, diacritic_insensitive")
        clean_env.setenv(ENV_INT_BITS, "32")
        config = ScannerConfig.from_env()
        assert config.skip_leading_whitespace is False
        assert config.compare_options == CompareOptions.CASE_INSENSITIVE | CompareOptions.DIACRITIC_INSENSITIVE
        assert config.int_bits == 32

    def test_from_env_unbounded(self, clean_env):
        clean_env.setenv(ENV_INT_BITS, "unbounded")
        assert ScannerConfig.from_env().int_bits is None

    def test_from_env_invalid_values_are_ignored(self, clean_env, caplog):
        clean_env.setenv(ENV_SKIP_WHITESPACE, "maybe")
        clean_env.setenv(ENV_COMPARE_OPTIONS, "fuzzy")
        clean_env.setenv(ENV_INT_BITS, "lots")
        with caplog.at_level(logging.WARNING, logger="scanlex.config.config"):
            config = ScannerConfig.from_env()
        assert config.to_dict() == ScannerConfig().to_dict()
        assert ENV_SKIP_WHITESPACE in caplog.text
        assert ENV_COMPARE_OPTIONS in caplog.text
        assert ENV_INT_BITS in caplog.text

    def test_from_env_reads_test_environment(self):
        """The suite runs with the settings from .env.test, loaded by conftest."""
        config = ScannerConfig.from_env()
        assert config.skip_leading_whitespace is False
        assert config.compare_options == CompareOptions.CASE_INSENSITIVE
        assert config.int_bits == 32


class TestScannerConfigFromFile:
    """Tests for TOML file loading."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "scanlex.toml"
        path.write_text(
            "[scanner]\n"
            "skip_leading_whitespace = false\n"
            'compare_options = ["case_insensitive"]\n'
            "int_bits = 16\n",
            encoding="utf-8",
        )
        config = ScannerConfig.from_file(str(path))
        assert config.skip_leading_whitespace is False
        assert config.compare_options == CompareOptions.CASE_INSENSITIVE
        assert config.int_bits == 16

    def test_from_file_without_table_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.toml"
        path.write_text("title = 'nothing here'\n", encoding="utf-8")
        assert ScannerConfig.from_file(str(path)).to_dict() == ScannerConfig().to_dict()

    def test_from_file_unbounded(self, tmp_path):
        path = tmp_path / "scanlex.toml"
        path.write_text('[scanner]\nint_bits = "none"\n', encoding="utf-8")
        assert ScannerConfig.from_file(str(path)).int_bits is None

    def test_from_file_invalid_value(self, tmp_path):
        path = tmp_path / "scanlex.toml"
        path.write_text('[scanner]\ncompare_options = "fuzzy"\n', encoding="utf-8")
        with pytest.raises(ValueError):
            ScannerConfig.from_file(str(path))

    def test_from_file_non_string_bool(self, tmp_path):
        path = tmp_path / "scanlex.toml"
        path.write_text("[scanner]\nskip_leading_whitespace = 1\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a boolean"):
            ScannerConfig.from_file(str(path))

    def test_from_file_non_string_compare_options(self, tmp_path):
        path = tmp_path / "scanlex.toml"
        path.write_text("[scanner]\ncompare_options = 5\n", encoding="utf-8")
        with pytest.raises(ValueError, match="string of names"):
            ScannerConfig.from_file(str(path))

    def test_from_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ScannerConfig.from_file(str(tmp_path / "missing.toml"))
