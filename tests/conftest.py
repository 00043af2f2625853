from __future__ import annotations

from pathlib import Path

import pytest

from alphabet import Alphabet
from catalog import standard_catalog
from debug import Debug
from machine import Machine
from permutation import Permutation

CONFIGS = Path(__file__).resolve().parents[1] / "configs"


@pytest.fixture(autouse=True)
def _quiet_debug():
    yield
    Debug().reset()


@pytest.fixture()
def alpha() -> Alphabet:
    return Alphabet()


@pytest.fixture()
def catalog(alpha):
    return list(standard_catalog(alpha).values())


@pytest.fixture()
def make_machine(alpha, catalog):
    """Build a machine from the naval catalog, optionally set up."""

    def _make(names, pawls=3, setting=None, plugs="", ring=None):
        m = Machine(alpha, len(names), pawls, catalog)
        m.insert_rotors(names)
        if setting is not None:
            m.set_rotors(setting, ring)
        m.set_plugboard(Permutation(plugs, alpha))
        return m

    return _make


@pytest.fixture()
def default_conf() -> Path:
    return CONFIGS / "default.conf"


@pytest.fixture()
def sample_input() -> Path:
    return CONFIGS / "sample.in"
