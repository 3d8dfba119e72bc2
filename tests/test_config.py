# =============================================================================
# test_config.py - Configuration Tests
# =============================================================================

import logging

import pytest
from stackasm.config import AssemblerConfig
from stackasm.errors import ConfigError, StackAsmError


class TestDefaults:

    def test_defaults(self):
        config = AssemblerConfig()
        assert config.encoding == "utf-8"
        assert config.output_format == "binary"
        assert config.byteorder == "little"
        assert config.log_level == "WARNING"
        assert config.level == logging.WARNING

    def test_defaults_validate(self):
        AssemblerConfig().validate()


class TestFromEnv:

    def test_empty_env_gives_defaults(self):
        assert AssemblerConfig.from_env() == AssemblerConfig()

    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv("SMASM_ENCODING", "latin-1")
        monkeypatch.setenv("SMASM_FORMAT", "HEX")
        monkeypatch.setenv("SMASM_BYTEORDER", "big")
        monkeypatch.setenv("SMASM_LOG_LEVEL", "debug")
        config = AssemblerConfig.from_env()
        assert config.encoding == "latin-1"
        assert config.output_format == "hex"
        assert config.byteorder == "big"
        assert config.log_level == "DEBUG"

    def test_invalid_values_ignored(self, monkeypatch):
        monkeypatch.setenv("SMASM_ENCODING", "no-such-codec")
        monkeypatch.setenv("SMASM_FORMAT", "elf")
        monkeypatch.setenv("SMASM_BYTEORDER", "middle")
        monkeypatch.setenv("SMASM_LOG_LEVEL", "loud")
        assert AssemblerConfig.from_env() == AssemblerConfig()


class TestValidate:

    @pytest.mark.parametrize("field,value", [
        ("encoding", "no-such-codec"),
        ("output_format", "elf"),
        ("byteorder", "middle"),
        ("log_level", "LOUD"),
    ])
    def test_invalid(self, field, value):
        config = AssemblerConfig(**{field: value})
        with pytest.raises(ConfigError) as exc_info:
            config.validate()
        assert isinstance(exc_info.value, StackAsmError)
