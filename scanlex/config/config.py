"""
ScannerConfig: defaults shared by the Scanner's numeric and matching helpers.

Settings can come from keyword arguments, the process environment (a `.env`
file is loaded with python-dotenv) or the `[scanner]` table of a TOML file.
"""
import logging
import os
from typing import Any, Dict, Optional, Union, TYPE_CHECKING

import toml
from dotenv import load_dotenv

if TYPE_CHECKING:
    from scanlex.scanner.compare import CompareOptions

logger = logging.getLogger(__name__)

load_dotenv()

ENV_SKIP_WHITESPACE = "SCANLEX_SKIP_WHITESPACE"
ENV_COMPARE_OPTIONS = "SCANLEX_COMPARE_OPTIONS"
ENV_INT_BITS = "SCANLEX_INT_BITS"

DEFAULT_INT_BITS = 64

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_UNBOUNDED_VALUES = {"none", "unbounded", ""}


def _parse_bool(value: Union[str, bool]) -> bool:
    if isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a boolean or a string, got {value!r}")
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Cannot interpret '{value}' as a boolean")


def _parse_int_bits(value: Union[str, int, None]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, str):
        if value.strip().lower() in _UNBOUNDED_VALUES:
            return None
        value = int(value.strip())
    if isinstance(value, bool) or not isinstance(value, int) or value < 2:
        raise ValueError(f"int_bits must be an integer of at least 2 or None, got {value!r}")
    return value


class ScannerConfig:
    """Configuration for a Scanner."""

    def __init__(
        self,
        skip_leading_whitespace: bool = True,
        compare_options: Union["CompareOptions", str] = "literal",
        int_bits: Optional[int] = DEFAULT_INT_BITS,
    ):
        # Import here to avoid circular dependency
        from scanlex.scanner.compare import CompareOptions

        self.skip_leading_whitespace = _parse_bool(skip_leading_whitespace)
        self.compare_options = CompareOptions.parse(compare_options)
        self.int_bits = _parse_int_bits(int_bits)

    @property
    def int_range(self) -> Optional[range]:
        """The signed integer range `parse_int` accepts, or None when unbounded."""
        if self.int_bits is None:
            return None
        limit = 1 << (self.int_bits - 1)
        return range(-limit, limit)

    @classmethod
    def from_env(cls) -> "ScannerConfig":
        """
        Build a config from SCANLEX_* environment variables.

        Values that cannot be parsed are logged and replaced by the default.
        """
        from scanlex.scanner.compare import CompareOptions

        config = cls()
        raw_skip = os.getenv(ENV_SKIP_WHITESPACE)
        if raw_skip is not None:
            try:
                config.skip_leading_whitespace = _parse_bool(raw_skip)
            except ValueError:
                logger.warning(f"Ignoring {ENV_SKIP_WHITESPACE}={raw_skip!r}: not a boolean.")

        raw_options = os.getenv(ENV_COMPARE_OPTIONS)
        if raw_options is not None:
            try:
                config.compare_options = CompareOptions.parse(raw_options)
            except ValueError as e:
                logger.warning(f"Ignoring {ENV_COMPARE_OPTIONS}={raw_options!r}: {e}")

        raw_bits = os.getenv(ENV_INT_BITS)
        if raw_bits is not None:
            try:
                config.int_bits = _parse_int_bits(raw_bits)
            except ValueError:
                logger.warning(f"Ignoring {ENV_INT_BITS}={raw_bits!r}: expected a width of at least 2 or 'none'.")

        logger.debug(f"ScannerConfig loaded from environment: {config.to_dict()}")
        return config

    @classmethod
    def from_file(cls, path: str) -> "ScannerConfig":
        """
        Build a config from the `[scanner]` table of a TOML file.

        Raises:
            FileNotFoundError: If `path` does not exist.
            ValueError: If a value in the table is invalid.
        """
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Scanner config file not found at '{path}'")

        with open(path, "r", encoding="utf-8") as f:
            data = toml.load(f)

        config = cls.from_dict(data.get("scanner", {}))
        logger.debug(f"ScannerConfig loaded from {path}: {config.to_dict()}")
        return config

    def to_dict(self) -> Dict[str, Any]:
        from scanlex.scanner.compare import CompareOptions

        return {
            "skip_leading_whitespace": self.skip_leading_whitespace,
            "compare_options": ",".join(
                name.lower() for name, member in CompareOptions.__members__.items()
                if member and member in self.compare_options
            ) or "literal",
            "int_bits": self.int_bits,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScannerConfig":
        compare_options = data.get("compare_options", "literal")
        if isinstance(compare_options, (list, tuple)):
            compare_options = ",".join(str(option) for option in compare_options)
        return cls(
            skip_leading_whitespace=data.get("skip_leading_whitespace", True),
            compare_options=compare_options,
            int_bits=data.get("int_bits", DEFAULT_INT_BITS),
        )

    def __repr__(self) -> str:
        return (
            f"ScannerConfig(skip_leading_whitespace={self.skip_leading_whitespace}, "
            f"compare_options={self.compare_options}, int_bits={self.int_bits})"
        )
