# settings_generator.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from alphabet import Alphabet
from catalog import natural_key, standard_catalog
from config_loader import SettingLine, read_config
from errors import ConfigError, EnigmaError
from machine import Machine

# ── helpers ───────────────────────────────────────────────────────


@dataclass(slots=True)
class GeneratorConfig:
    """Knobs for one batch of setting lines."""

    count: int = 1
    pairs: int = 10
    rings: bool = False
    seed: int | None = None


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return up to *k* disjoint plug pairs."""
    k = min(k, len(alpha) // 2)
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def _pick(names: List[str], k: int, what: str, rng: Random | SystemRandom) -> List[str]:
    if len(names) < k:
        raise ConfigError(f"Catalog has {len(names)} {what}, need {k}")
    return rng.sample(names, k)


def generate_setting(machine: Machine, cfg: GeneratorConfig, rng: Random | SystemRandom) -> SettingLine:
    """Return a random setting line that MACHINE will accept."""
    wheels = machine.catalog()
    names = sorted(wheels, key=natural_key)
    reflectors = [n for n in names if wheels[n].reflecting()]
    moving = [n for n in names if wheels[n].rotates()]
    fixed = [n for n in names if not wheels[n].rotates() and not wheels[n].reflecting()]

    n_moving = machine.pawls
    n_fixed = machine.num_rotors - 1 - n_moving
    rotors = (
        _pick(reflectors, 1, "reflectors", rng)
        + _pick(fixed, n_fixed, "fixed rotors", rng)
        + _pick(moving, n_moving, "moving rotors", rng)
    )

    alpha = machine.alphabet.chars
    width = machine.num_rotors - 1
    seed = "".join(rng.choices(alpha, k=width))
    ring = "".join(rng.choices(alpha, k=width)) if cfg.rings else None
    plugs = " ".join(f"({p})" for p in choose_pairs(alpha, cfg.pairs, rng))
    return SettingLine(rotors, seed, ring, plugs)


def naval_machine() -> Machine:
    """A 5-slot, 3-pawl machine over A–Z loaded with the standard catalog."""
    alpha = Alphabet()
    return Machine(alpha, 5, 3, standard_catalog(alpha).values())


def generate(machine: Machine, cfg: GeneratorConfig) -> List[SettingLine]:
    rng = build_rng(cfg.seed)
    return [generate_setting(machine, cfg, rng) for _ in range(cfg.count)]


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="enigma-settings",
        description="Generate random setting lines for a machine configuration",
    )
    p.add_argument(
        "config", type=Path, nargs="?",
        help="Machine configuration file (default: naval catalog, 5 slots, 3 pawls)",
    )
    p.add_argument("--count", type=int, default=1, help="Number of lines (default: 1)")
    p.add_argument("--pairs", type=int, default=10, help="Maximum plugboard pairs (default: 10)")
    p.add_argument("--rings", action="store_true", help="Also emit a ring setting")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--outfile", type=Path, help="Destination file (default: standard output)")
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    args = parse_cli(argv)
    cfg = GeneratorConfig(count=args.count, pairs=args.pairs, rings=args.rings, seed=args.seed)

    try:
        machine = read_config(args.config) if args.config else naval_machine()
        lines = generate(machine, cfg)
    except EnigmaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    text = "".join(f"{line}\n" for line in lines)
    if args.outfile is None:
        sys.stdout.write(text)
    else:
        args.outfile.write_text(text, encoding="utf-8")
        print(f"✅  Wrote {len(lines)} setting line(s) to {args.outfile}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
