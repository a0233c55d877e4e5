"""
Types layer - serializable views of error nodes.
"""

from errcode_python.types.report import ErrorReport

__all__ = [
    "ErrorReport",
]
