import logging

import pytest

from debug import COMPONENTS, Debug


def test_everything_off_by_default():
    dbg = Debug()
    assert dbg.status() == {c: False for c in COMPONENTS}


def test_switches_are_shared():
    a, b = Debug(), Debug()
    a.enable("rotor")
    assert b.status()["rotor"]
    b.toggle("rotor")
    assert not a.is_on("rotor")


def test_status_is_a_copy():
    dbg = Debug()
    dbg.status()["config"] = True
    assert not dbg.is_on("config")


def test_unknown_component():
    with pytest.raises(ValueError):
        Debug().enable("keyboard")


def test_log_respects_switches(caplog):
    caplog.set_level(logging.DEBUG, logger="ENIGMA")
    dbg = Debug()
    dbg.log("config", "hidden %d", 1)
    dbg.enable("config")
    dbg.log("config", "shown %d", 2)
    dbg.toggle_global(False)
    dbg.log("config", "hidden %d", 3)
    assert [r.getMessage() for r in caplog.records] == ["[CONFIG] shown 2"]
