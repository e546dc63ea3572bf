"""Core value types and checksum helpers."""

from __future__ import annotations

import zlib
from dataclasses import dataclass

_CRC_POLYNOMIAL = 0xEDB88320


def _build_crc_table() -> tuple[int, ...]:
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            crc = (crc >> 1) ^ (_CRC_POLYNOMIAL if crc & 1 else 0)
        table.append(crc)
    return tuple(table)


_CRC_TABLE = _build_crc_table()


def _as_bytes(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


@dataclass(frozen=True, order=True)
class SemVer:
    """A semantic version, ordered by major, then minor, then patch."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def crc32(text: str | bytes) -> int:
    """Return the standard reflected CRC-32 of ``text`` (UTF-8 for strings)."""
    return zlib.crc32(_as_bytes(text)) & 0xFFFFFFFF


def crc16(text: str | bytes) -> int:
    """Return a 16-bit checksum computed with the CRC-32 table on a 16-bit register."""
    crc = 0xFFFF
    for byte in _as_bytes(text):
        crc = ((crc >> 8) ^ _CRC_TABLE[(crc ^ byte) & 0xFF]) & 0xFFFF
    return crc ^ 0xFFFF