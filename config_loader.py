# config_loader.py
"""Readers for the two text formats the machine is driven by.

A *configuration file* describes the machine::

    ABCDEFGHIJKLMNOPQRSTUVWXYZ      alphabet (optional, default A–Z)
    5 3                             rotor slots, pawls
    I MQ (AELTPHQXRU) (BKNW) ...    name, type, cycles  (repeated)
    Beta N (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
    B R (AE) (BN) (CK) ...

Types are ``M<notches>`` (moving), ``N`` (fixed) and ``R`` (reflector).
Entries may wrap across lines; only whitespace separates tokens.

A *message file* starts with a setting line and then holds message lines::

    * B Beta III IV I AXLE [RING] (YF) (ZH)
    FROM HIS SHOULDER HIAWATHA
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import List, TextIO

from alphabet import Alphabet
from debug import Debug
from errors import ConfigError, InputError, SettingError
from machine import Machine
from permutation import Permutation
from rotor_and_reflector import FixedRotor, MovingRotor, Reflector, Rotor

debug = Debug()

_int_re = re.compile(r"^[+-]?\d+$")
_cycle_token_re = re.compile(r"^\([^\s]*\)$")

GROUP = 5


# ────────────────────────────────────────────────────────────────────────
#  1. Configuration file
# ────────────────────────────────────────────────────────────────────────


def read_config(path: str | Path) -> Machine:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        raise ConfigError(f"could not open {path}") from None
    return parse_config(text)


def parse_config(text: str) -> Machine:
    """Build a Machine from the contents of a configuration file."""
    tokens = text.split()
    if not tokens:
        raise ConfigError("configuration file truncated")

    pos = 0
    if _alphabet_omitted(tokens):
        alphabet = Alphabet()
    else:
        alphabet = Alphabet(tokens[0])
        pos = 1

    if len(tokens) < pos + 2:
        raise ConfigError("configuration file truncated")
    num_rotors = _read_int(tokens[pos], "number of rotors")
    pawls = _read_int(tokens[pos + 1], "number of pawls")
    pos += 2

    rotors: List[Rotor] = []
    while pos < len(tokens):
        rotor, pos = _read_rotor(tokens, pos, alphabet)
        rotors.append(rotor)

    debug.log("config", "%d slots, %d pawls, %d rotors over %s",
              num_rotors, pawls, len(rotors), alphabet.chars)
    return Machine(alphabet, num_rotors, pawls, rotors)


def _alphabet_omitted(tokens: List[str]) -> bool:
    # "5 3 I MQ ..." has no alphabet; "0123456789 5 3 ..." has one
    head = tokens[:3]
    if len(head) < 2 or not (_int_re.match(head[0]) and _int_re.match(head[1])):
        return False
    return len(head) == 2 or not _int_re.match(head[2])


def _read_int(token: str, what: str) -> int:
    if not _int_re.match(token):
        raise ConfigError(f"Bad config file: expected {what}, got {token!r}")
    return int(token)


def _read_rotor(tokens: List[str], pos: int, alphabet: Alphabet) -> tuple[Rotor, int]:
    if pos + 1 >= len(tokens):
        raise ConfigError(f"bad rotor description at {tokens[pos]!r}")
    name, kind = tokens[pos], tokens[pos + 1]
    pos += 2

    cycles: List[str] = []
    while pos < len(tokens) and _cycle_token_re.match(tokens[pos]):
        cycles.append(tokens[pos])
        pos += 1
    perm = Permutation(" ".join(cycles), alphabet)

    if kind.startswith("M"):
        return MovingRotor(name, perm, kind[1:]), pos
    if kind == "N":
        return FixedRotor(name, perm), pos
    if kind == "R":
        return Reflector(name, perm), pos
    raise ConfigError(f"Rotor type {kind!r} of {name} not recognized")


# ────────────────────────────────────────────────────────────────────────
#  2. Setting lines
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class SettingLine:
    """One parsed ``* rotors seed [ring] [plugboard]`` line."""

    rotors: List[str]
    seed: str
    ring: str | None = None
    plugboard: str = ""

    def __str__(self) -> str:
        parts = ["*", *self.rotors, self.seed]
        if self.ring is not None:
            parts.append(self.ring)
        if self.plugboard:
            parts.append(self.plugboard)
        return " ".join(parts)


def is_setting_line(line: str) -> bool:
    return line.lstrip().startswith("*")


def parse_setting(line: str, num_rotors: int) -> SettingLine:
    tokens = line.split()
    if not tokens or tokens[0] != "*":
        raise SettingError(f"Incorrect setting format: * not at beginning of {line!r}")
    if len(tokens) < num_rotors + 2:
        raise SettingError(
            f"Setting line needs {num_rotors} rotor names and a setting: {line!r}"
        )

    rotors = tokens[1 : num_rotors + 1]
    seed = tokens[num_rotors + 1]
    rest = tokens[num_rotors + 2 :]

    ring = None
    if rest and not rest[0].startswith("("):
        ring, rest = rest[0], rest[1:]
    return SettingLine(rotors, seed, ring, " ".join(rest))


def setup_machine(machine: Machine, line: str) -> SettingLine:
    """Apply a setting line to MACHINE and return what was parsed."""
    setting = parse_setting(line, machine.num_rotors)
    machine.insert_rotors(setting.rotors)
    machine.set_rotors(setting.seed, setting.ring)
    machine.set_plugboard(Permutation(setting.plugboard, machine.alphabet))
    debug.log("config", "%s", setting)
    return setting


# ────────────────────────────────────────────────────────────────────────
#  3. Message stream & output
# ────────────────────────────────────────────────────────────────────────


def format_groups(msg: str, block: int = GROUP) -> str:
    """Split MSG into space-separated groups of BLOCK characters."""
    return " ".join(msg[i : i + block] for i in range(0, len(msg), block))


def process(machine: Machine, lines: Iterable[str], out: TextIO) -> None:
    """Convert every message line in LINES, writing one output line each.

    Setting lines reconfigure MACHINE and produce no output. Blank lines
    before the first setting line are skipped; later ones come out blank.
    """
    configured = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        if is_setting_line(line):
            setup_machine(machine, line)
            configured = True
        elif not configured:
            if line.strip():
                raise InputError("missing leading setting line")
        else:
            out.write(format_groups(machine.convert_message(line)) + "\n")

    if not configured:
        raise InputError("missing leading setting line")
