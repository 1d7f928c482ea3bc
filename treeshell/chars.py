"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_SIZE_MASK = (1 << 64) - 1
_LONG_MAX = (1 << 63) - 1


def _code(c: int | str) -> int:
    """Return the character code of ``c``, given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Magnitudes beyond the signed 64-bit
    range give -1 for positive input and 0 for negative input; the result
    is then narrowed to a signed 32-bit integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for ch in stripped:
        if not is_digit(ch):
            break
        result = (result * 10 + ord(ch) - ord("0")) & _SIZE_MASK
    if result > _LONG_MAX:
        return 0 - (sign == 1)
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    n = int(n)
    if not -(1 << 31) <= n < (1 << 31):
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; return others unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; return others unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code