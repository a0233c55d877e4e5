"""层级错误码库：从标签生成稳定错误码并检测错误派生关系。

errcode-python: hierarchical, identity-stable error codes.

Build a root error from a label, derive subtypes whose codes combine their
ancestors' codes, and ask whether one error descends from another.
"""
from __future__ import annotations

from errcode_python.codes import (
    CodeEngine,
    CodeEngineConfig,
    combine_codes,
    generate_code,
)
from errcode_python.errors import (
    CodeFormatError,
    CodeRangeError,
    ErrcodeError,
    ErrorSeed,
    GeneralError,
    as_general_error,
    is_error,
    is_general_error,
    new_general_error,
    new_general_error_with_custom_codes,
)
from errcode_python.types.report import ErrorReport

__version__ = "0.1.0"

__all__ = [
    # Codes
    "CodeEngine",
    "CodeEngineConfig",
    # Library errors
    "CodeFormatError",
    "CodeRangeError",
    "ErrcodeError",
    # Error nodes
    "ErrorReport",
    "ErrorSeed",
    "GeneralError",
    "as_general_error",
    "combine_codes",
    "generate_code",
    "is_error",
    "is_general_error",
    "new_general_error",
    "new_general_error_with_custom_codes",
    # Version
    "__version__",
]
