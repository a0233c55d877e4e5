"""
Code engine for errcode-python.

Pure functions mapping labels to base-36 codes and combining codes along a
derivation chain.
"""

from errcode_python.codes.base36 import (
    BASE36_ALPHABET,
    decode_base36,
    encode_base36,
    is_valid_code,
)
from errcode_python.codes.engine import (
    DEFAULT_ENGINE,
    CodeCombiner,
    CodeEngine,
    CodeEngineConfig,
    CodeGenerator,
    combine_codes,
    fnv1a_32,
    generate_code,
)

__all__ = [
    "BASE36_ALPHABET",
    "CodeCombiner",
    "CodeEngine",
    "CodeEngineConfig",
    "CodeGenerator",
    "DEFAULT_ENGINE",
    "combine_codes",
    "decode_base36",
    "encode_base36",
    "fnv1a_32",
    "generate_code",
    "is_valid_code",
]
