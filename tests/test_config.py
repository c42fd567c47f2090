import sys, pathlib
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

import pytest

import config


def test_as_float_unset_uses_default():
    assert config._as_float(None) is None
    assert config._as_float(None, 3.0) == 3.0


@pytest.mark.parametrize("raw", ["", "   "])
def test_as_float_blank_counts_as_unset(raw):
    assert config._as_float(raw) is None


def test_as_float_parses_value():
    assert config._as_float("12.5") == 12.5
    assert config._as_float(" 7 ") == 7.0


def test_as_float_rejects_garbage():
    with pytest.raises(ValueError):
        config._as_float("soon")
