# catalog.py
from __future__ import annotations

import re
from typing import Dict, Tuple

from alphabet import Alphabet
from permutation import Permutation
from rotor_and_reflector import FixedRotor, MovingRotor, Reflector, Rotor

_num_re = re.compile(r"^([A-Za-z]+)(\d+)$")
_roman = {"I": 1, "V": 5, "X": 10}
_roman_re = re.compile(r"^[IVX]+$")


def _roman_value(text: str) -> int:
    total = 0
    for ch, nxt in zip(text, text[1:] + " "):
        v = _roman[ch]
        total += -v if nxt != " " and _roman[nxt] > v else v
    return total


def natural_key(name: str):
    """Natural-sort rotor names so I, II, …, VIII, R1, R2, …, R10, B, Beta."""
    if _roman_re.match(name):
        return (0, "", _roman_value(name))
    m = _num_re.match(name)
    if m:
        prefix, num = m.groups()
        return (1, prefix, int(num))
    return (2, name, 0)


# ────────────────────────────────────────────────────────────────────────
#  Naval wheel database, cycle notation over A–Z
# ────────────────────────────────────────────────────────────────────────

# name → (cycles, notches)
MOVING: Dict[str, Tuple[str, str]] = {
    "I":    ("(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)", "Q"),
    "II":   ("(FIXVYOMW) (CDKLHUP) (ESZ) (BJ) (GR) (NT) (A) (Q)", "E"),
    "III":  ("(ABDHPEJT) (CFLVMZOYQIRWUKXSG) (N)", "V"),
    "IV":   ("(AEPLIYWCOXMRFZBSTGJQNH) (DV) (KU)", "J"),
    "V":    ("(AVOLDRWFIUQ)(BZKSMNHYC) (EGTJPX)", "Z"),
    "VI":   ("(AJQDVLEOZWIYTS) (CGMNHFUX) (BPRK)", "ZM"),
    "VII":  ("(ANOUPFRIMBZTLWKSVEGCJYDHXQ)", "ZM"),
    "VIII": ("(AFLSETWUNDHOZVICQ) (BKJ) (GXY) (MPR)", "ZM"),
}

FIXED: Dict[str, str] = {
    "Beta":  "(ALBEVFCYODJWUGNMQTZSKPR) (HIX)",
    "Gamma": "(AFNIRLBSQWVXGUZDKMTPCOYJHE)",
}

REFLECTORS: Dict[str, str] = {
    "B": "(AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP) (RX) (SZ) (TV)",
    "C": "(AR) (BD) (CO) (EJ) (FN) (GT) (HK) (IV) (LM) (PW) (QZ) (SX) (UY)",
}


def standard_catalog(alphabet: Alphabet | None = None) -> Dict[str, Rotor]:
    """Return fresh naval rotors keyed by name. The wirings are over A–Z.

    `settings_generator` falls back to these when no configuration is given;
    `configs/default.conf` spells out the same wheels in file form.
    """
    alpha = alphabet if alphabet is not None else Alphabet()
    wheels: Dict[str, Rotor] = {}
    for name, (cycles, notches) in MOVING.items():
        wheels[name] = MovingRotor(name, Permutation(cycles, alpha), notches)
    for name, cycles in FIXED.items():
        wheels[name] = FixedRotor(name, Permutation(cycles, alpha))
    for name, cycles in REFLECTORS.items():
        wheels[name] = Reflector(name, Permutation(cycles, alpha))
    return wheels


__all__ = [
    "MOVING",
    "FIXED",
    "REFLECTORS",
    "natural_key",
    "standard_catalog",
]
