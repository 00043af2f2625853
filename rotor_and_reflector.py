# rotor_and_reflector.py
from __future__ import annotations

from copy import deepcopy

from alphabet import Alphabet
from debug import Debug
from errors import PlugboardError, RotorError, SettingError
from permutation import Permutation

debug = Debug()


class Rotor:
    """A wiring plus a rotational position and a ring offset.

    The base class never moves and never reflects; the subclasses below only
    override the handful of predicates that tell them apart.
    """

    def __init__(self, name: str, perm: Permutation) -> None:
        self.name = name
        self.permutation = perm
        self.setting = 0
        self.ring_setting = 0

    @property
    def alphabet(self) -> Alphabet:
        return self.permutation.alphabet

    @property
    def size(self) -> int:
        return self.permutation.size()

    # ── setting & ring helpers ────────────────────────────────────
    def _position(self, posn: int | str) -> int:
        if isinstance(posn, str):
            i = self.alphabet.to_int(posn)
            if i < 0:
                raise SettingError(f"Setting {posn!r} not in alphabet of rotor {self.name}")
            return i
        return self.permutation.wrap(posn)

    def set(self, posn: int | str) -> "Rotor":
        self.setting = self._position(posn)
        return self

    def set_ring(self, posn: int | str) -> "Rotor":
        self.ring_setting = self._position(posn)
        return self

    # ── variant predicates ───────────────────────────────────────
    def rotates(self) -> bool:
        return False

    def reflecting(self) -> bool:
        return False

    def at_notch(self) -> bool:
        return False

    def advance(self) -> None:
        """Only moving rotors step; everything else ignores the pawl."""

    # ── signal paths ---------------------------------------------
    def convert_forward(self, p: int) -> int:
        perm = self.permutation
        return perm.wrap(perm.permute(p + self.setting) - self.setting)

    def convert_backward(self, e: int) -> int:
        perm = self.permutation
        return perm.wrap(perm.invert(e + self.setting) - self.setting)

    def clone(self) -> "Rotor":
        """Independent copy sharing the immutable wiring."""
        return deepcopy(self, {id(self.permutation): self.permutation})

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} pos={self.setting} ring={self.ring_setting}>"


class MovingRotor(Rotor):
    def __init__(self, name: str, perm: Permutation, notches: str) -> None:
        super().__init__(name, perm)
        for ch in notches:
            if ch not in perm.alphabet:
                raise RotorError(f"Bad notch {ch!r} on rotor {name}")
        self.notches = frozenset(notches)

    def rotates(self) -> bool:
        return True

    def at_notch(self) -> bool:
        window = self.permutation.wrap(self.setting + self.ring_setting)
        return self.alphabet.to_char(window) in self.notches

    def advance(self) -> None:
        self.setting = (self.setting + 1) % self.size
        debug.log("stepping", "%s -> %d", self.name, self.setting)


class FixedRotor(Rotor):
    pass


class Reflector(Rotor):
    def __init__(self, name: str, perm: Permutation) -> None:
        # every symbol must sit in a 2-cycle: involution with no self-maps
        if not (perm.involution() and perm.derangement()):
            raise RotorError(
                f"Reflector {name} must pair every symbol: wiring has fixed points or longer cycles"
            )
        super().__init__(name, perm)

    def reflecting(self) -> bool:
        return True


class Plugboard(Rotor):
    def __init__(self, perm: Permutation, name: str = "Plugboard") -> None:
        if not perm.involution():
            raise PlugboardError(f"Invalid plugboard {perm}: not an involution")
        super().__init__(name, perm)

    def convert_forward(self, p: int) -> int:
        out = super().convert_forward(p)
        debug.log("plugboard", "%d->%d", p, out)
        return out

    # forward and backward coincide for an involution
    convert_backward = convert_forward
