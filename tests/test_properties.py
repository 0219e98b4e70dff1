import numpy as np
import pytest
from numpy.random import default_rng

from ropex import IndexOutOfRange, Rope
from tests.utils.workloads import edit_script, random_items, random_text


def _fragmented_rope(seed: int, length: int = 120) -> tuple[Rope, str]:
    rng = default_rng(seed)
    text = random_text(rng, length)
    rope = Rope()
    cursor = 0
    while cursor < length:
        size = int(rng.integers(1, 9))
        rope.append(text[cursor:cursor + size])
        cursor += size
    return rope, text


@pytest.mark.parametrize("seed", range(4))
def test_split_concat_round_trip(seed: int):
    rope, text = _fragmented_rope(seed)

    for k in range(rope.length() + 1):
        head, tail = rope.split(k)
        assert head.length() + tail.length() == rope.length()
        head.append(tail)
        assert head == rope
        assert head.to_sequence() == text


def test_length_is_additive():
    rng = default_rng(11)
    for _ in range(20):
        a = Rope(random_text(rng, int(rng.integers(0, 30))))
        b = Rope(random_text(rng, int(rng.integers(0, 30))))
        assert (a + b).length() == a.length() + b.length()


@pytest.mark.parametrize("seed", range(3))
def test_index_substring_consistency(seed: int):
    rope, text = _fragmented_rope(seed)

    for i in range(rope.length()):
        assert rope.at(i) == rope.substring(i, 1)[0] == text[i]


@pytest.mark.parametrize("seed", range(4))
def test_insert_erase_inverse(seed: int):
    rng = default_rng(100 + seed)
    rope, _ = _fragmented_rope(seed, length=60)
    for _ in range(25):
        index = int(rng.integers(0, rope.length() + 1))
        insert = Rope(random_text(rng, int(rng.integers(0, 12))))
        expected = rope.copy()

        rope.insert(index, insert)
        rope.erase(index, insert.length())

        assert rope == expected


@pytest.mark.parametrize("seed", range(3))
def test_balance_preserves_sequence(seed: int):
    rope, text = _fragmented_rope(seed, length=400)

    rope.balance()
    rope.balance()

    assert rope.is_balanced()
    assert rope.to_sequence() == text


@pytest.mark.parametrize("kind", ["str", "list"])
def test_edit_script_matches_reference(kind: str):
    rng = default_rng(7)
    initial = random_text(rng, 50) if kind == "str" else random_items(rng, 50)
    rope = Rope(initial)
    reference = list(initial)
    script = edit_script(rng, initial_length=50, edits=300, kind=kind, max_chunk=6)

    for step, edit in enumerate(script):
        if edit.op == "insert":
            rope.insert(edit.index, edit.payload)
            reference[edit.index:edit.index] = list(edit.payload)
        elif edit.op == "erase":
            rope.erase(edit.index, edit.count)
            del reference[edit.index:edit.index + edit.count]
        else:
            assert rope.at(edit.index) == reference[edit.index]
        if step % 50 == 49:
            rope.balance()

    assert list(rope) == reference
    assert rope.length() == len(reference)


def test_out_of_range_at_every_length():
    rope = Rope()
    for length in range(10):
        with pytest.raises(IndexOutOfRange):
            rope.at(length)
        with pytest.raises(IndexOutOfRange):
            rope.substring(0, length + 1)
        with pytest.raises(IndexOutOfRange):
            rope.insert(length + 1, "s")
        with pytest.raises(IndexOutOfRange):
            rope.erase(0, length + 1)
        rope.insert(length, "s")
        assert rope.at(length) == "s"


def test_ndarray_rope_round_trip():
    rng = default_rng(3)
    values = rng.integers(0, 100, size=64)
    rope = Rope(values[:10])
    for start in range(10, 64, 9):
        rope.append(values[start:start + 9])

    rope.balance()

    assert np.array_equal(rope.to_sequence(), values)
    head, tail = rope.split(30)
    assert np.array_equal(head.to_sequence(), values[:30])
    assert np.array_equal(tail.to_sequence(), values[30:])
