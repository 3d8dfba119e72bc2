"""
stackasm - Configuration
========================

Settings shared by the library and the smasm command. Configuration can
come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied on top by the CLI)
"""

from dataclasses import dataclass
import codecs
import logging
import os

from stackasm.errors import ConfigError


OUTPUT_FORMATS = ("binary", "text", "hex")
BYTEORDERS = ("little", "big")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AssemblerConfig:
    """
    Configuration for a compile run.

    Attributes:
        encoding: Codec used to decode program text (default: "utf-8")
        output_format: "binary", "text" or "hex" (default: "binary")
        byteorder: Word byte order for binary output (default: "little")
        log_level: Logging level name for the CLI (default: "WARNING")
    """

    encoding: str = "utf-8"
    output_format: str = "binary"
    byteorder: str = "little"
    log_level: str = "WARNING"

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create AssemblerConfig from environment variables.

        Environment variables (all optional):
            SMASM_ENCODING: Source encoding (e.g., "utf-8", "latin-1")
            SMASM_FORMAT: Output format ("binary", "text", "hex")
            SMASM_BYTEORDER: Binary byte order ("little", "big")
            SMASM_LOG_LEVEL: Logging level ("DEBUG", "INFO", ...)

        Invalid values are ignored and the default kept.

        Returns:
            AssemblerConfig with values from environment variables
        """
        config = cls()

        if encoding := os.environ.get("SMASM_ENCODING"):
            if _is_known_encoding(encoding):
                config.encoding = encoding

        if output_format := os.environ.get("SMASM_FORMAT"):
            if output_format.lower() in OUTPUT_FORMATS:
                config.output_format = output_format.lower()

        if byteorder := os.environ.get("SMASM_BYTEORDER"):
            if byteorder.lower() in BYTEORDERS:
                config.byteorder = byteorder.lower()

        if log_level := os.environ.get("SMASM_LOG_LEVEL"):
            if log_level.upper() in LOG_LEVELS:
                config.log_level = log_level.upper()

        return config

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPER METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def validate(self) -> None:
        """
        Check every setting.

        Raises:
            ConfigError: On the first invalid setting
        """
        if not _is_known_encoding(self.encoding):
            raise ConfigError(f"unknown encoding '{self.encoding}'")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"unknown output format '{self.output_format}' "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )
        if self.byteorder not in BYTEORDERS:
            raise ConfigError(
                f"unknown byte order '{self.byteorder}' "
                f"(expected one of: {', '.join(BYTEORDERS)})"
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"unknown log level '{self.log_level}'")

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)


def _is_known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True
