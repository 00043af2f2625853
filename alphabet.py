# alphabet.py
from __future__ import annotations

import string
from collections.abc import Iterator

from debug import Debug
from errors import AlphabetError

debug = Debug()

UPPER = string.ascii_uppercase
RESERVED = frozenset("()*")


class Alphabet:
    """An ordered set of distinct characters, addressed by index 0..N-1."""

    def __init__(self, chars: str = UPPER) -> None:
        if not chars:
            raise AlphabetError("Empty alphabet")
        seen: set[str] = set()
        for ch in chars:
            if ch in RESERVED or ch.isspace():
                raise AlphabetError(f"Bad alphabet: {ch!r} not allowed")
            if ch in seen:
                raise AlphabetError(f"Non-unique alphabet: {ch!r} repeats")
            seen.add(ch)

        self._chars: str = chars
        self._index: dict[str, int] = {ch: i for i, ch in enumerate(chars)}
        debug.log("alphabet", "built alphabet of %d symbols", len(chars))

    @property
    def chars(self) -> str:
        return self._chars

    def size(self) -> int:
        return len(self._chars)

    def contains(self, ch: str) -> bool:
        return ch in self._index

    # integer signal → letter
    def to_char(self, index: int) -> str:
        if not (0 <= index < len(self._chars)):
            hi = len(self._chars) - 1
            raise AlphabetError(f"Index {index} out of range 0–{hi}")
        return self._chars[index]

    # letter → integer signal, -1 when absent
    def to_int(self, ch: str) -> int:
        return self._index.get(ch, -1)

    def index(self, ch: str) -> int:
        """Like `to_int` but raise AlphabetError for a foreign character."""
        try:
            return self._index[ch]
        except KeyError:
            raise AlphabetError(f"{ch!r} not in alphabet") from None

    # ── niceties --------------------------------------------------
    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, ch: object) -> bool:
        return ch in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"<Alphabet {self._chars!r}>"
