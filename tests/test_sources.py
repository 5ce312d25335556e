"""Tests for sources module."""

import pytest

from lazy_sequences.sources import fake_name_sequence, name_sequence, range_sequence


@pytest.mark.parametrize("start,total", [(1, 20), (0, 1), (-5, 7), (100, 3)])
def test_range_sequence_values(start, total):
    """Test that the range has exactly total elements equal to start + index."""
    values = list(range_sequence(start, total))

    assert len(values) == total
    assert values == [start + i for i in range(total)]


def test_range_sequence_empty():
    """Test that a zero total produces an empty sequence."""
    assert list(range_sequence(1, 0)) == []


def test_range_sequence_rejects_negative_total_eagerly():
    """Test that a negative total is rejected before iteration starts."""
    with pytest.raises(ValueError, match="non-negative"):
        range_sequence(1, -1)


def test_range_sequence_rejects_non_integers():
    """Test that non-integer arguments are rejected."""
    with pytest.raises(TypeError, match="integers"):
        range_sequence(1.5, 3)


def test_name_sequence_exact_order():
    """Test that names are produced in their fixed order on every call."""
    expected = ["Steve", "John", "Sarah", "David", "Olivia"]

    assert list(name_sequence()) == expected
    assert list(name_sequence()) == expected


def test_sequences_are_independent():
    """Test that consuming one sequence does not affect another."""
    first = name_sequence()
    second = name_sequence()

    assert next(first) == "Steve"
    assert next(first) == "John"
    assert next(second) == "Steve"
    assert list(first) == ["Sarah", "David", "Olivia"]


def test_range_sequence_is_lazy():
    """Test that the range only produces values as they are requested."""
    numbers = range_sequence(10, 1_000_000_000)

    assert next(numbers) == 10
    assert next(numbers) == 11


def test_fake_name_sequence_repeatable_with_seed():
    """Test that the same seed produces the same generated names."""
    names1 = list(fake_name_sequence(10, seed=42))
    names2 = list(fake_name_sequence(10, seed=42))

    assert len(names1) == 10
    assert names1 == names2
    assert all(isinstance(name, str) and name for name in names1)


def test_fake_name_sequence_instances_do_not_share_state():
    """Test that interleaved consumption does not change generated names."""
    expected = list(fake_name_sequence(4, seed=7))

    first = fake_name_sequence(4, seed=7)
    second = fake_name_sequence(4, seed=7)
    interleaved_first = []
    interleaved_second = []
    for _ in range(4):
        interleaved_first.append(next(first))
        interleaved_second.append(next(second))

    assert interleaved_first == expected
    assert interleaved_second == expected


def test_fake_name_sequence_rejects_negative_count():
    """Test that a negative count is rejected."""
    with pytest.raises(ValueError, match="non-negative"):
        fake_name_sequence(-3)
