"""
Base-36 codec for 32-bit error codes.

Codes are written with the alphabet ``0-9A-Z`` (upper case only), most
significant digit first, with no leading zeros.
"""

from __future__ import annotations

BASE36_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
RADIX = len(BASE36_ALPHABET)
UINT32_MASK = 0xFFFFFFFF

_DIGIT_VALUES: dict[str, int] = {ch: i for i, ch in enumerate(BASE36_ALPHABET)}


def encode_base36(value: int, *, zero_digit: bool = True) -> str:
    """Encode an unsigned 32-bit integer as base-36 text.

    Args:
        value: Integer in ``[0, 2**32)``
        zero_digit: Encode zero as ``"0"``; when False zero encodes to ``""``

    Returns:
        Shortest base-36 representation of ``value``

    Raises:
        CodeRangeError: If ``value`` is outside the 32-bit unsigned range
    """
    if value < 0 or value > UINT32_MASK:
        from errcode_python.errors.base import CodeRangeError

        raise CodeRangeError(f"Value {value} does not fit in 32 bits", value=value)

    if value == 0:
        return BASE36_ALPHABET[0] if zero_digit else ""

    digits = []
    while value > 0:
        value, k = divmod(value, RADIX)
        digits.append(BASE36_ALPHABET[k])
    return "".join(reversed(digits))


def decode_base36(code: str, *, little_endian: bool = False) -> int:
    """Decode base-36 text into an unsigned 32-bit integer.

    Wider values wrap modulo 2**32. The empty string decodes to zero.

    Args:
        code: Base-36 text
        little_endian: Read the least significant digit first

    Returns:
        Decoded integer

    Raises:
        CodeFormatError: If ``code`` contains a character outside ``0-9A-Z``
    """
    for position, ch in enumerate(code):
        if ch not in _DIGIT_VALUES:
            from errcode_python.errors.base import CodeFormatError

            raise CodeFormatError(
                f"Invalid base-36 digit {ch!r} in code {code!r}",
                code=code,
                position=position,
            )

    result = 0
    for ch in reversed(code) if little_endian else code:
        result = (result * RADIX + _DIGIT_VALUES[ch]) & UINT32_MASK
    return result


def is_valid_code(code: str) -> bool:
    """Check whether ``code`` only uses the base-36 alphabet."""
    return all(ch in _DIGIT_VALUES for ch in code)
