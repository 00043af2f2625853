import pytest

from alphabet import Alphabet
from catalog import MOVING, REFLECTORS, standard_catalog
from errors import PlugboardError, RotorError, SettingError
from permutation import Permutation
from rotor_and_reflector import FixedRotor, MovingRotor, Plugboard, Reflector


@pytest.fixture()
def rotor_i(alpha):
    return MovingRotor("I", Permutation(MOVING["I"][0], alpha), "Q")


def test_forward_and_backward_at_zero(rotor_i):
    assert rotor_i.convert_forward(0) == 4      # A -> E
    assert rotor_i.convert_backward(4) == 0


def test_conversion_follows_setting(rotor_i):
    rotor_i.set(1)
    # B -> K through the wiring, shifted back by one
    assert rotor_i.convert_forward(0) == 9
    assert rotor_i.convert_backward(9) == 0


def test_backward_inverts_forward_at_every_setting(rotor_i):
    for s in range(26):
        rotor_i.set(s)
        for p in range(26):
            assert rotor_i.convert_backward(rotor_i.convert_forward(p)) == p


def test_set_accepts_letters_and_wraps(rotor_i):
    rotor_i.set("C")
    assert rotor_i.setting == 2
    rotor_i.set(-1)
    assert rotor_i.setting == 25
    rotor_i.set_ring(27)
    assert rotor_i.ring_setting == 1
    with pytest.raises(SettingError):
        rotor_i.set("?")
    with pytest.raises(SettingError):
        rotor_i.set_ring("a")


def test_notch_sees_setting_plus_ring(rotor_i):
    assert not rotor_i.at_notch()
    rotor_i.set("Q")
    assert rotor_i.at_notch()
    rotor_i.set("P").set_ring(1)
    assert rotor_i.at_notch()
    rotor_i.set_ring(0)
    assert not rotor_i.at_notch()


def test_ring_does_not_change_wiring(rotor_i):
    before = [rotor_i.convert_forward(p) for p in range(26)]
    rotor_i.set_ring(7)
    assert [rotor_i.convert_forward(p) for p in range(26)] == before


def test_advance_wraps(rotor_i):
    rotor_i.set(25)
    rotor_i.advance()
    assert rotor_i.setting == 0


def test_bad_notch(alpha):
    with pytest.raises(RotorError):
        MovingRotor("X", Permutation("", alpha), "Q1")


def test_variants(alpha):
    wheels = standard_catalog(alpha)
    assert wheels["I"].rotates() and not wheels["I"].reflecting()
    assert not wheels["Beta"].rotates() and not wheels["Beta"].reflecting()
    assert wheels["B"].reflecting() and not wheels["B"].rotates()
    assert isinstance(wheels["Gamma"], FixedRotor)


def test_fixed_and_reflector_never_move(alpha):
    wheels = standard_catalog(alpha)
    for name in ("Beta", "B"):
        wheels[name].set(3)
        wheels[name].advance()
        assert wheels[name].setting == 3
        assert not wheels[name].at_notch()


@pytest.mark.parametrize("name", sorted(REFLECTORS))
def test_reflector_is_its_own_inverse(alpha, name):
    refl = Reflector(name, Permutation(REFLECTORS[name], alpha))
    for s in range(26):
        refl.set(s)
        for c in range(26):
            out = refl.convert_forward(c)
            assert out != c
            assert refl.convert_forward(out) == c


@pytest.mark.parametrize("cycles", ["(AB)", "(ABC) (DE)", ""])
def test_reflector_rejects_unpaired_wiring(alpha, cycles):
    with pytest.raises(RotorError):
        Reflector("X", Permutation(cycles, alpha))


def test_plugboard_needs_involution(alpha):
    with pytest.raises(PlugboardError):
        Plugboard(Permutation("(ABC)", alpha))
    pb = Plugboard(Permutation("(AB)", alpha))
    assert pb.convert_forward(0) == 1
    assert pb.convert_backward(1) == 0
    assert pb.convert_forward(5) == 5


def test_clone_is_independent(rotor_i):
    rotor_i.set(4)
    dup = rotor_i.clone()
    dup.set(9)
    assert rotor_i.setting == 4
    assert dup.permutation is rotor_i.permutation
    assert dup.notches == rotor_i.notches


def test_reflector_over_odd_alphabet_is_rejected():
    with pytest.raises(RotorError):
        Reflector("odd", Permutation("(AB)", Alphabet("ABC")))
