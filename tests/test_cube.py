import pytest

from nissy.cube import (
    MOVE_CUBES,
    SOLVED_CUBE,
    TRANS_CUBES,
    TRANS_CUBES_INVERSE,
    ZERO_CUBE,
    Cube,
    corner_orientation,
    corner_permutation,
    edge_orientation,
    edge_permutation,
    static_cube,
)


def test_static_cube_splits_corners_and_edges():
    values = list(range(20, 40))
    cube = static_cube(*values)
    assert cube.corners == tuple(values[:8])
    assert cube.edges == tuple(values[8:])


@pytest.mark.parametrize("count", [0, 19, 21])
def test_static_cube_wrong_count(count):
    with pytest.raises(ValueError):
        static_cube(*([0] * count))


def test_cube_rejects_wrong_lengths():
    with pytest.raises(ValueError):
        Cube((0,) * 7, (0,) * 12)
    with pytest.raises(ValueError):
        Cube((0,) * 8, (0,) * 13)


def test_cube_rejects_out_of_range_value():
    with pytest.raises(ValueError):
        Cube((256,) + (0,) * 7, (0,) * 12)


def test_zero_cube_is_zero():
    assert ZERO_CUBE.is_zero() is True
    assert SOLVED_CUBE.is_zero() is False


def test_identity_transformation_is_solved():
    identity = static_cube(*range(8), *range(12))
    assert TRANS_CUBES["UFr"] == identity
    assert TRANS_CUBES_INVERSE["UFr"] == identity
    assert TRANS_CUBES["UFr"].is_zero() is False


def test_solved_cube_pieces():
    assert [corner_permutation(c) for c in SOLVED_CUBE.corners] == list(
        range(8))
    assert [edge_permutation(e) for e in SOLVED_CUBE.edges] == list(range(12))
    assert all(corner_orientation(c) == 0 for c in SOLVED_CUBE.corners)
    assert all(edge_orientation(e) == 0 for e in SOLVED_CUBE.edges)


def test_packed_fields_from_format():
    # 70 = 0x40 | 6: counter-clockwise twist of corner 6
    assert corner_orientation(70) == 2
    assert corner_permutation(70) == 6
    assert edge_orientation(25) == 1


def test_eighteen_moves_present():
    assert len(MOVE_CUBES) == 18
    assert len(TRANS_CUBES) == 48
    assert set(TRANS_CUBES) == set(TRANS_CUBES_INVERSE)
    assert not any(cube.is_zero() for cube in MOVE_CUBES.values())
    assert not any(cube.is_zero() for cube in TRANS_CUBES.values())


@pytest.mark.parametrize("name", sorted(MOVE_CUBES))
def test_move_cubes_are_valid(name):
    cube = MOVE_CUBES[name]
    assert sorted(corner_permutation(c) for c in cube.corners) == list(
        range(8))
    assert sorted(edge_permutation(e) for e in cube.edges) == list(range(12))
    assert sum(corner_orientation(c) for c in cube.corners) % 3 == 0
    assert sum(edge_orientation(e) for e in cube.edges) % 2 == 0


@pytest.mark.parametrize("name", sorted(TRANS_CUBES))
def test_trans_cubes_are_permutations(name):
    for cube in (TRANS_CUBES[name], TRANS_CUBES_INVERSE[name]):
        assert sorted(corner_permutation(c) for c in cube.corners) == list(
            range(8))
        assert sorted(edge_permutation(e) for e in cube.edges) == list(
            range(12))


@pytest.mark.parametrize("face", ["U", "D", "R", "L", "F", "B"])
def test_half_turns_keep_orientation(face):
    cube = MOVE_CUBES[face + "2"]
    assert all(corner_orientation(c) == 0 for c in cube.corners)
    assert all(edge_orientation(e) == 0 for e in cube.edges)


def test_cube_is_hashable_and_comparable():
    a = static_cube(*range(8), *range(12))
    assert a == SOLVED_CUBE
    assert len({a, SOLVED_CUBE, ZERO_CUBE}) == 2