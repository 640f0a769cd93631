"""Tests for recovery levels, capacity limits, and option types."""

import dataclasses

import pytest

from qr_verify.errors import DataTooLargeError
from qr_verify.options import (
    CAPACITY,
    MAX_BYTES_HIGH,
    MAX_BYTES_HIGHEST,
    MAX_BYTES_LOW,
    MAX_BYTES_MEDIUM,
    EncodeOptions,
    EncodeResult,
    Strength,
    check_capacity,
    max_bytes,
)


def test_strength_ordering():
    assert Strength.LOW < Strength.MEDIUM < Strength.HIGH < Strength.HIGHEST


@pytest.mark.parametrize("strength,name", [
    (Strength.LOW, "Low"),
    (Strength.MEDIUM, "Medium"),
    (Strength.HIGH, "High"),
    (Strength.HIGHEST, "Highest"),
])
def test_strength_str(strength, name):
    assert str(strength) == name


@pytest.mark.parametrize("text,expected", [
    ("low", Strength.LOW),
    ("MEDIUM", Strength.MEDIUM),
    ("High", Strength.HIGH),
    (" highest ", Strength.HIGHEST),
])
def test_strength_from_name(text, expected):
    assert Strength.from_name(text) is expected


def test_strength_from_name_invalid():
    with pytest.raises(ValueError, match="low, medium, high, highest"):
        Strength.from_name("ultra")


def test_capacity_values():
    assert max_bytes(Strength.LOW) == MAX_BYTES_LOW == 2953
    assert max_bytes(Strength.MEDIUM) == MAX_BYTES_MEDIUM == 2331
    assert max_bytes(Strength.HIGH) == MAX_BYTES_HIGH == 1663
    assert max_bytes(Strength.HIGHEST) == MAX_BYTES_HIGHEST == 1273


def test_capacity_decreases_with_strength():
    limits = [CAPACITY[s] for s in sorted(Strength)]
    assert limits == sorted(limits, reverse=True)
    assert len(set(limits)) == len(limits)


@pytest.mark.parametrize("unknown", [-1, 99, None, "high"])
def test_max_bytes_unknown_falls_back_to_medium(unknown):
    assert max_bytes(unknown) == MAX_BYTES_MEDIUM


def test_capacity_table_is_read_only():
    with pytest.raises(TypeError):
        CAPACITY[Strength.LOW] = 1


def test_check_capacity_counts_utf8_bytes():
    assert check_capacity("é", Strength.MEDIUM) == 2

    with pytest.raises(DataTooLargeError) as exc:
        check_capacity("é" * 1000, Strength.HIGHEST)
    assert exc.value.size == 2000
    assert exc.value.limit == MAX_BYTES_HIGHEST


def test_check_capacity_at_exact_limit():
    assert check_capacity("A" * MAX_BYTES_LOW, Strength.LOW) == MAX_BYTES_LOW
    with pytest.raises(DataTooLargeError):
        check_capacity("A" * (MAX_BYTES_LOW + 1), Strength.LOW)


def test_encode_options_defaults():
    opts = EncodeOptions()
    assert opts.strength is None
    assert opts.size == 256
    assert opts.fill_color == "black"
    assert opts.back_color == "white"


def test_encode_options_coerces_strength():
    assert EncodeOptions(strength=2).strength is Strength.HIGH


@pytest.mark.parametrize("size", [0, -5])
def test_encode_options_rejects_non_positive_size(size):
    with pytest.raises(ValueError, match="positive"):
        EncodeOptions(size=size)


def test_encode_result_is_immutable():
    result = EncodeResult(image=b"\x01\x02\x03", data="test data", strength=Strength.HIGH, size=256, version=5)
    assert result.version == 5
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.strength = Strength.LOW
