"""错误体系：可派生、代码稳定的层级错误类型。

Error hierarchy for errcode-python.

Provides GeneralError nodes with stable derived codes, chain matching
helpers, and the library's own failure types.
"""

from errcode_python.errors.base import (
    CodeFormatError,
    CodeRangeError,
    ErrcodeError,
    ErrorContext,
)
from errcode_python.errors.chain import ChainLink, is_error, walk_chain
from errcode_python.errors.general import (
    ErrorSeed,
    GeneralError,
    as_general_error,
    is_general_error,
    new_general_error,
    new_general_error_with_custom_codes,
)

__all__ = [
    # Error nodes
    "ChainLink",
    # Library errors
    "CodeFormatError",
    "CodeRangeError",
    "ErrcodeError",
    "ErrorContext",
    "ErrorSeed",
    "GeneralError",
    "as_general_error",
    "is_error",
    "is_general_error",
    "new_general_error",
    "new_general_error_with_custom_codes",
    "walk_chain",
]
