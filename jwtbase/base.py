"""Base64 encoding and decoding with configurable alphabets and fill patterns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

__all__ = [
    "Alphabet",
    "BASE64",
    "BASE64URL",
    "BASE64URL_PERCENT_ENCODING",
    "DecodeError",
    "Padding",
    "count_padding",
    "decode",
    "encode",
    "index",
    "pad",
    "trim",
]


class DecodeError(ValueError):
    """Raised when text cannot be decoded with the given alphabet."""


@dataclass(frozen=True)
class Alphabet:
    """A 64-symbol alphabet together with the fill patterns it accepts.

    The first fill is the one written by encoding and padding; decoding
    accepts any of them.
    """

    data: str
    fills: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fills", tuple(self.fills))
        if len(self.data) != 64 or len(set(self.data)) != 64:
            raise ValueError("an alphabet needs 64 distinct symbols")
        if not self.fills or not all(self.fills):
            raise ValueError("an alphabet needs at least one non-empty fill")

    @property
    def fill(self) -> str:
        """The fill pattern used when producing output."""
        return self.fills[0]


_LETTERS_AND_DIGITS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ" "abcdefghijklmnopqrstuvwxyz" "0123456789"
)

BASE64 = Alphabet(_LETTERS_AND_DIGITS + "+/", ("=",))
"""Standard base64 alphabet."""

BASE64URL = Alphabet(_LETTERS_AND_DIGITS + "-_", ("%3d",))
"""URL- and filename-safe alphabet, with a percent-encoded fill."""

BASE64URL_PERCENT_ENCODING = Alphabet(_LETTERS_AND_DIGITS + "-_", ("%3D", "%3d"))
"""URL-safe alphabet accepting either case of the percent-encoded fill."""


@dataclass(frozen=True)
class Padding:
    """How many fill patterns end a string, and how many characters they span."""

    count: int = 0
    length: int = 0

    def __add__(self, other: Padding) -> Padding:
        if not isinstance(other, Padding):
            return NotImplemented
        return Padding(self.count + other.count, self.length + other.length)


def index(alphabet: Union[Alphabet, str], symbol: str) -> int:
    """Return the position of ``symbol`` within ``alphabet``."""
    chars = alphabet.data if isinstance(alphabet, Alphabet) else alphabet
    position = chars.find(symbol) if len(symbol) == 1 else -1
    if position < 0:
        raise DecodeError("Invalid input: not within alphabet")
    return position


def count_padding(base: str, fills: Iterable[str]) -> Padding:
    """Count the fill patterns repeated at the end of ``base``.

    At every step the fills are tried in the given order and the first one
    that ends the remaining text is removed.
    """
    candidates = [fill for fill in fills if fill]
    result = Padding()
    while True:
        for fill in candidates:
            if base.endswith(fill):
                result = result + Padding(1, len(fill))
                base = base[: -len(fill)]
                break
        else:
            return result


def encode(data: Union[bytes, bytearray, memoryview, str], alphabet: Alphabet = BASE64) -> str:
    """Encode ``data`` with ``alphabet``, appending its fill as needed."""
    raw = data.encode() if isinstance(data, str) else bytes(data)
    missing = -len(raw) % 3
    padded = raw + b"\0" * missing
    symbols = []
    for a, b, c in zip(*[iter(padded)] * 3):
        triple = (a << 16) | (b << 8) | c
        symbols.extend(alphabet.data[(triple >> shift) & 0x3F] for shift in (18, 12, 6, 0))
    text = "".join(symbols)
    if missing:
        text = text[:-missing] + alphabet.fill * missing
    return text


def decode(base: str, alphabet: Alphabet = BASE64) -> bytes:
    """Decode ``base`` written in ``alphabet``, fill included."""
    padding = count_padding(base, alphabet.fills)
    if padding.count > 2:
        raise DecodeError("Invalid input: too much fill")
    size = len(base) - padding.length
    if (size + padding.count) % 4 != 0:
        raise DecodeError("Invalid input: incorrect total size")

    sextets = [index(alphabet, symbol) for symbol in base[:size]]
    sextets.extend([0] * padding.count)
    out = bytearray()
    for a, b, c, d in zip(*[iter(sextets)] * 4):
        triple = (a << 18) | (b << 12) | (c << 6) | d
        out += triple.to_bytes(3, "big")
    return bytes(out[: len(out) - padding.count])


def pad(base: str, alphabet: Alphabet = BASE64) -> str:
    """Append fill so that the length of ``base`` becomes a multiple of four symbols."""
    return base + alphabet.fill * (-len(base) % 4)


def trim(base: str, alphabet: Alphabet = BASE64) -> str:
    """Cut ``base`` at the first fill pattern it contains."""
    positions = [pos for pos in (base.find(fill) for fill in alphabet.fills) if pos >= 0]
    return base[: min(positions)] if positions else base