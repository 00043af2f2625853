# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence

from alphabet import Alphabet
from debug import Debug
from errors import InputError, PlugboardError, RotorError, SettingError
from permutation import Permutation
from rotor_and_reflector import Plugboard, Rotor

debug = Debug()


class Machine:
    """A complete machine: a reflector in slot 0, fixed rotors after it,
    `pawls` moving rotors on the right, and a plugboard at both ends."""

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        pawls: int,
        all_rotors: Iterable[Rotor],
    ) -> None:
        if num_rotors <= 1:
            raise RotorError(f"Machine needs more than one rotor slot, got {num_rotors}")
        if not (0 <= pawls < num_rotors):
            raise RotorError(f"Pawls must be in 0..{num_rotors - 1}, got {pawls}")

        self.alphabet = alphabet
        self.num_rotors = num_rotors
        self.pawls = pawls

        # each machine owns its copies; they keep their state across inserts
        self._catalog: dict[str, Rotor] = {}
        for rotor in all_rotors:
            if rotor.name in self._catalog:
                raise RotorError(f"Rotor {rotor.name} defined more than once")
            if rotor.alphabet != alphabet:
                raise RotorError(f"Rotor {rotor.name} uses a different alphabet")
            self._catalog[rotor.name] = rotor.clone()

        self.active_rotors: list[Rotor] = []
        self.plugboard: Rotor = Plugboard(Permutation("", alphabet))

    def rotor_names(self) -> list[str]:
        return list(self._catalog)

    def catalog(self) -> dict[str, Rotor]:
        return dict(self._catalog)

    def positions(self) -> str:
        """Window letters of slots 1..K-1, in the format `set_rotors` takes."""
        return "".join(self.alphabet.to_char(r.setting) for r in self.active_rotors[1:])

    # ── rotor selection & settings ────────────────────────────────

    def insert_rotors(self, names: Sequence[str]) -> None:
        """Fill my slots with the rotors NAMES (NAMES[0] is the reflector).

        Rotors keep whatever setting and ring they had; `set_rotors` resets them.
        """
        if len(names) != self.num_rotors:
            raise RotorError(f"Invalid number of rotors: need {self.num_rotors}, got {len(names)}")

        chosen: list[Rotor] = []
        for name in names:
            if name not in self._catalog:
                raise RotorError(f"Unknown rotor {name!r}")
            if any(r.name == name for r in chosen):
                raise RotorError(f"Rotor {name} selected more than once")
            chosen.append(self._catalog[name])

        first_moving = self.num_rotors - self.pawls
        for i, rotor in enumerate(chosen):
            if i == 0:
                if not rotor.reflecting():
                    raise RotorError(f"First rotor {rotor.name} is not a reflector")
            elif rotor.reflecting():
                raise RotorError(f"Reflector {rotor.name} can only sit in the first slot")
            elif i < first_moving and rotor.rotates():
                raise RotorError(f"Slot {i} needs a fixed rotor, got moving rotor {rotor.name}")
            elif i >= first_moving and not rotor.rotates():
                raise RotorError(f"Slot {i} needs a moving rotor, got {rotor.name}")

        self.active_rotors = chosen

    def set_rotors(self, setting: str, ring: str | None = None) -> None:
        """Rotate slots 1..K-1 to the window letters in SETTING.

        Without RING every ring offset goes back to 0. With RING, each rotor
        gets ring offset RING[i] and setting SETTING[i] - RING[i], so SETTING
        is still what shows in the window.
        """
        self._require_rotors()
        seed = self._setting_indices(setting, "setting")
        rings = self._setting_indices(ring, "ring setting") if ring is not None else None

        for j, rotor in enumerate(self.active_rotors[1:]):
            if rings is None:
                rotor.set_ring(0)
                rotor.set(seed[j])
            else:
                rotor.set(seed[j] - rings[j])
                rotor.set_ring(rings[j])

    def set_plugboard(self, perm: Permutation) -> None:
        if perm.alphabet != self.alphabet:
            raise PlugboardError("Plugboard uses a different alphabet")
        for ch in perm.alphabet:
            if perm.permute_char(ch) != perm.invert_char(ch):
                raise PlugboardError(f"Invalid plugboard {perm}: {ch!r} is not paired both ways")
        self.plugboard = Plugboard(perm)

    def _setting_indices(self, text: str, what: str) -> list[int]:
        if len(text) != self.num_rotors - 1:
            raise SettingError(
                f"Incorrect {what} {text!r}: need {self.num_rotors - 1} characters"
            )
        out: list[int] = []
        for ch in text:
            i = self.alphabet.to_int(ch)
            if i < 0:
                raise SettingError(f"Char {ch!r} in {what} not in alphabet")
            out.append(i)
        return out

    def _require_rotors(self) -> None:
        if not self.active_rotors:
            raise RotorError("No rotors inserted")

    # ── stepping logic  ─────────────────────────────────────────

    def step(self) -> None:
        """Advance rotors one key-press.

        The fast rotor always steps. A rotor at its notch steps its left
        neighbour and itself, which gives the double step of a middle rotor.
        """
        rotors = self.active_rotors
        k = self.num_rotors
        can_rotate = [False] * k
        can_rotate[k - 1] = True
        for i in range(k - 1, 0, -1):
            if rotors[i].at_notch() and rotors[i - 1].rotates():
                can_rotate[i] = True
                can_rotate[i - 1] = True

        for rotor, flag in zip(rotors, can_rotate):
            if flag:
                rotor.advance()

    # ── encipher  ───────────────────────────────────────────────

    def convert(self, c: int) -> int:
        """Step, then send signal C (an index) through the machine."""
        self._require_rotors()
        self.step()

        rotors = self.active_rotors
        signal = self.plugboard.convert_forward(c)
        for rotor in reversed(rotors):
            signal = rotor.convert_forward(signal)
        for rotor in rotors[1:]:
            signal = rotor.convert_backward(signal)
        signal = self.plugboard.convert_backward(signal)

        debug.log("encipher", "%d -> %d at %s", c, signal, self.positions())
        return signal

    def convert_message(self, msg: str) -> str:
        """Encipher MSG, ignoring whitespace."""
        out: list[str] = []
        for ch in "".join(msg.split()):
            i = self.alphabet.to_int(ch)
            if i < 0:
                raise InputError(f"Character {ch!r} not in alphabet")
            out.append(self.alphabet.to_char(self.convert(i)))
        return "".join(out)

    def __repr__(self) -> str:
        names = " ".join(r.name for r in self.active_rotors) or "empty"
        return f"<Machine {names} pos={self.positions()}>"
