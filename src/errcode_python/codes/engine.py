"""
Code engine: label hashing and code combination.

Codes are derived from free text without a central registry. A label is
hashed with 32-bit FNV-1a and written in base 36; a subtype's code is the
sum (mod 2**32) of its parent's code and its own label code.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field

from errcode_python.codes.base36 import UINT32_MASK, decode_base36, encode_base36
from errcode_python.telemetry.logger import get_logger

CodeGenerator = Callable[[str], str]
"""Maps a label to a code."""

CodeCombiner = Callable[[str, str], str]
"""Combines a parent code with a child code."""

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193

_TRUTHY = ("1", "true", "yes", "on")

logger = get_logger("errcode_python.codes")


def fnv1a_32(data: bytes) -> int:
    """Compute the 32-bit FNV-1a hash of ``data``."""
    h = FNV32_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV32_PRIME) & UINT32_MASK
    return h


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class CodeEngineConfig:
    """Configuration for code generation.

    Attributes:
        zero_digit: Encode the value zero as "0" instead of an empty code
        legacy_digit_order: Decode combine operands least significant digit
            first, for codes issued by implementations that accumulate
            digits in that order. Digits keep their standard values, so
            codes from implementations that decode 'S' as 18 only match
            when no combined operand contains 'S'
    """

    zero_digit: bool = True
    legacy_digit_order: bool = False

    @classmethod
    def default(cls) -> CodeEngineConfig:
        """Create default configuration."""
        return cls()

    @classmethod
    def from_env(cls) -> CodeEngineConfig:
        """Create configuration from environment variables.

        Reads ERRCODE_ZERO_DIGIT and ERRCODE_LEGACY_DIGIT_ORDER.
        """
        return cls(
            zero_digit=_env_flag("ERRCODE_ZERO_DIGIT", True),
            legacy_digit_order=_env_flag("ERRCODE_LEGACY_DIGIT_ORDER", False),
        )


@dataclass(frozen=True)
class CodeEngine:
    """Stateless code generator and combiner.

    ``generate`` and ``combine`` are plain callables, so an engine's bound
    methods can be handed to the error constructors as a custom code space.

    Example:
        >>> engine = CodeEngine()
        >>> engine.generate("general error")
        '1MWWTMD'
    """

    config: CodeEngineConfig = field(default_factory=CodeEngineConfig.default)

    @classmethod
    def from_env(cls) -> CodeEngine:
        """Create an engine configured from environment variables."""
        config = CodeEngineConfig.from_env()
        logger.debug(
            "Code engine configured from environment",
            zero_digit=config.zero_digit,
            legacy_digit_order=config.legacy_digit_order,
        )
        return cls(config)

    def encode(self, value: int) -> str:
        """Encode an integer as a code."""
        return encode_base36(value, zero_digit=self.config.zero_digit)

    def decode(self, code: str) -> int:
        """Decode a code into an integer."""
        return decode_base36(code, little_endian=self.config.legacy_digit_order)

    def generate(self, label: str) -> str:
        """Hash a label into a code.

        Args:
            label: Any text, including the empty string and text with
                lone surrogates

        Returns:
            Base-36 code of the label's FNV-1a hash
        """
        return self.encode(fnv1a_32(label.encode("utf-8", "surrogatepass")))

    def combine(self, code_a: str, code_b: str) -> str:
        """Combine two codes by modular addition.

        Overflow past 2**32 wraps silently.
        """
        return self.encode((self.decode(code_a) + self.decode(code_b)) & UINT32_MASK)


DEFAULT_ENGINE = CodeEngine()


def generate_code(label: str) -> str:
    """Hash a label into a code with the default engine."""
    return DEFAULT_ENGINE.generate(label)


def combine_codes(code_a: str, code_b: str) -> str:
    """Combine two codes with the default engine."""
    return DEFAULT_ENGINE.combine(code_a, code_b)
