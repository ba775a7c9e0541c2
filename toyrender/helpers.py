"""Small shared helpers: string splitting, buffer sizing and result-code checks."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

WHITE = (1.0, 1.0, 1.0, 1.0)
GREY = (0.05, 0.05, 0.05, 1.0)
LIGHT_BLUE = (0.4, 0.8, 1.0, 1.0)
LIGHT_GREEN = (0.4, 1.0, 0.8, 1.0)

_UINT32_MASK = 0xFFFFFFFF
_CONSTANT_BUFFER_ALIGNMENT = 256


def split_string(s: str, separators: str | Iterable[str]) -> list[str]:
    """Split ``s`` on any of the given separator characters.

    Empty pieces are dropped. The character right after a separator is always
    taken as the start of the next piece, even if it is itself a separator.
    """
    seps = set(separators)
    parts: list[str] = []
    start = 0
    chars = iter(enumerate(s))
    for index, char in chars:
        if char in seps:
            if start < index:
                parts.append(s[start:index])
            next(chars, None)
            start = index + 1
    if start < len(s):
        parts.append(s[start:])
    return parts


def calc_const_buffer_byte_size(byte_size: int) -> int:
    """Round ``byte_size`` up to the next multiple of 256, as a 32-bit value."""
    mask = ~(_CONSTANT_BUFFER_ALIGNMENT - 1) & _UINT32_MASK
    return ((byte_size + _CONSTANT_BUFFER_ALIGNMENT - 1) & _UINT32_MASK) & mask


def hr_to_string(hr: int) -> str:
    """Format a result code the way it appears in error messages."""
    return f"HRESULT of 0x{hr & _UINT32_MASK:08X}"


class HrError(RuntimeError):
    """Raised when a result code reports failure."""

    def __init__(self, hr: int) -> None:
        super().__init__(hr_to_string(hr))
        self.hr = hr


def _failed(hr: int) -> bool:
    return bool(hr & _UINT32_MASK & 0x80000000)


def throw_if_failed(hr: int) -> None:
    """Raise :class:`HrError` if ``hr`` is a failure code (high bit set)."""
    if _failed(hr):
        raise HrError(hr)


def load_binary(filename: str | Path) -> bytes:
    """Return the whole contents of a binary file."""
    return Path(filename).read_bytes()