import pytest

from nissy.tables import (
    COCSEP_CLASSES,
    EOESEP_BUF,
    EOESEP_TABLESIZE,
    ESEP_MAX,
    get_eoesep_pval,
    h48_coordmax,
    h48_get,
    h48_set,
    h48_tablesize,
    set_eoesep_pval,
)


def test_coordmax_base():
    assert h48_coordmax(0) == COCSEP_CLASSES * ESEP_MAX


@pytest.mark.parametrize("h", range(12))
def test_coordmax_doubles(h):
    assert h48_coordmax(h) == h48_coordmax(0) << h


@pytest.mark.parametrize("h", [0, 1, 2, 3, 7, 11])
@pytest.mark.parametrize("k", [2, 4])
def test_tablesize_covers_coordinates(h, k):
    per_byte = 8 // k
    size = h48_tablesize(h, k)
    assert size * per_byte >= h48_coordmax(h)
    assert (size - 1) * per_byte < h48_coordmax(h)


def test_eoesep_buffer_holds_every_entry():
    table = bytearray(EOESEP_BUF)
    last = EOESEP_TABLESIZE - 1
    set_eoesep_pval(table, last, 9)
    assert get_eoesep_pval(table, last) == 9
    assert get_eoesep_pval(table, last - 1) == 0
    with pytest.raises(IndexError):
        get_eoesep_pval(table, EOESEP_TABLESIZE)


@pytest.mark.parametrize("k", [1, 2, 4, 8])
def test_set_get_round_trip(k):
    table = bytearray(16)
    entries = len(table) * (8 // k)
    values = [i % (1 << k) for i in range(entries)]
    for i, v in enumerate(values):
        h48_set(table, i, k, v)
    assert [h48_get(table, i, k) for i in range(entries)] == values


def test_set_does_not_touch_neighbours():
    table = bytearray(b"\xff" * 4)
    h48_set(table, 5, 2, 0)
    assert h48_get(table, 5, 2) == 0
    assert h48_get(table, 4, 2) == h48_get(table, 6, 2) == h48_get(table, 0, 2)
    assert h48_get(table, 0, 2) == 3


def test_eoesep_high_nibble_layout():
    table = bytearray(2)
    set_eoesep_pval(table, 1, 0xA)
    assert table[0] == 0xA0
    assert get_eoesep_pval(table, 0) == 0


def test_eoesep_round_trip():
    table = bytearray(b"\xff" * 8)
    for i in range(16):
        set_eoesep_pval(table, i, 15 - i)
    assert [get_eoesep_pval(table, i) for i in range(16)] == \
        [15 - i for i in range(16)]


def test_invalid_bits():
    with pytest.raises(ValueError):
        h48_get(bytes(4), 0, 3)
    with pytest.raises(ValueError):
        h48_tablesize(0, 5)


def test_value_too_large():
    table = bytearray(4)
    with pytest.raises(ValueError):
        h48_set(table, 0, 2, 4)
    with pytest.raises(ValueError):
        set_eoesep_pval(table, 0, 16)


def test_negative_index():
    with pytest.raises(IndexError):
        h48_get(bytes(4), -1, 4)


def test_negative_h():
    with pytest.raises(ValueError):
        h48_coordmax(-1)