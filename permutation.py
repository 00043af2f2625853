# permutation.py
from __future__ import annotations

import re

from alphabet import Alphabet
from debug import Debug
from errors import CycleError

debug = Debug()

_CYCLES_RE = re.compile(r"\s*(?:\([^\s()]+\)\s*)*")
_CYCLE_RE = re.compile(r"\(([^\s()]+)\)")


class Permutation:
    """A permutation of `alphabet` written in cycle notation.

    ``Permutation("(AELT) (BK)", alpha)`` maps A→E, E→L, L→T, T→A, B→K and
    K→B; every character not named in a cycle maps to itself. Whitespace is
    allowed between cycles but not inside one.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        if "()" in cycles:
            raise CycleError(f"Bad cycle: empty cycle in {cycles!r}")
        if not _CYCLES_RE.fullmatch(cycles):
            raise CycleError(f"Bad cycle: {cycles!r}")

        self.alphabet = alphabet
        self.cycles: tuple[str, ...] = tuple(_CYCLE_RE.findall(cycles))

        used: set[str] = set()
        for cycle in self.cycles:
            for ch in cycle:
                if ch not in alphabet:
                    raise CycleError(f"Bad cycle: {ch!r} not in alphabet")
                if ch in used:
                    raise CycleError(f"Bad cycle: {ch!r} is a duplicate")
                used.add(ch)

        # integer lookup tables, identity for unlisted characters
        n = alphabet.size()
        self._fwd = list(range(n))
        self._rev = list(range(n))
        for cycle in self.cycles:
            idx = [alphabet.to_int(ch) for ch in cycle]
            for a, b in zip(idx, idx[1:] + idx[:1]):
                self._fwd[a] = b
                self._rev[b] = a
        debug.log("permutation", "%s", self)

    def size(self) -> int:
        return self.alphabet.size()

    def wrap(self, p: int) -> int:
        """Return P modulo the alphabet size, in 0..size()-1."""
        return p % self.size()

    # ── index form ------------------------------------------------
    def permute(self, p: int) -> int:
        return self._fwd[self.wrap(p)]

    def invert(self, c: int) -> int:
        return self._rev[self.wrap(c)]

    # ── character form --------------------------------------------
    def permute_char(self, p: str) -> str:
        return self.alphabet.to_char(self._fwd[self.alphabet.index(p)])

    def invert_char(self, c: str) -> str:
        return self.alphabet.to_char(self._rev[self.alphabet.index(c)])

    # ── properties ------------------------------------------------
    def derangement(self) -> bool:
        """True iff no character maps to itself."""
        return all(i != j for i, j in enumerate(self._fwd))

    def involution(self) -> bool:
        """True iff applying the permutation twice is the identity."""
        return self._fwd == self._rev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.alphabet == other.alphabet and self._fwd == other._fwd

    def __repr__(self) -> str:
        body = " ".join(f"({c})" for c in self.cycles)
        return f"<Permutation {body or 'identity'}>"
