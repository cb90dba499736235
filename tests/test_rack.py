import pytest

from scrabbler import Rack
from scrabbler.rack import BLANK_INDEX


def test_from_string_counts_letters_and_blanks():
    rack = Rack.from_string("EE*?Q")
    assert rack.count("E") == 2
    assert rack.count("Q") == 1
    assert rack.blanks == 2
    assert len(rack) == 5
    assert str(rack) == "EEQ**"


def test_from_string_reads_seven_tiles_and_ignores_junk():
    rack = Rack.from_string("AB1cDEFGHIJ")
    assert str(rack) == "ABDEF"
    assert len(Rack.from_string("ABCDEFGHIJ")) == 7


def test_take_restores_on_exit():
    rack = Rack.from_string("AB")
    with rack.take(0):
        assert rack.count("A") == 0
    assert rack.count("A") == 1

    with pytest.raises(KeyError):
        with rack.take(1):
            raise KeyError("x")
    assert rack.count("B") == 1


def test_take_missing_tile_raises():
    rack = Rack.from_string("A")
    with pytest.raises(ValueError):
        with rack.take(BLANK_INDEX):
            pass


def test_leave():
    rack = Rack.from_string("CATS*")
    assert str(rack.leave(["C", "A", "t"])) == "ST"
    assert str(rack) == "ACST*"
    with pytest.raises(ValueError):
        rack.leave(["Z"])


def test_count_reads_lowercase_as_blank():
    rack = Rack.from_string("AS*")
    assert rack.count("s") == 1
    assert rack.count("?") == 1
    assert rack.count("S") == 1
    with pytest.raises(ValueError):
        rack.count("1")
    with pytest.raises(ValueError):
        rack.leave(["AB"])
