import pytest

from nissy.solvecheck import SOLVE_CASES, SolveCase, check_all, check_one


def test_seven_reference_cases():
    assert len(SOLVE_CASES) == 7
    assert SOLVE_CASES[0] == SolveCase(
        scramble="R' D R U R' D' R U'",
        solutions="U R' D R U' R' D' R\nB' D2 B U' B' D2 B U\n",
    )


@pytest.mark.parametrize("case", SOLVE_CASES)
def test_each_expected_solution_passes_check_one(case):
    for line in case.solutions.split("\n")[:-1]:
        assert check_one(line + "\n", case.solutions) is True


@pytest.mark.parametrize("case", SOLVE_CASES)
def test_full_solution_list_passes_check_all(case):
    assert check_all(case.solutions, case.solutions) is True


@pytest.mark.parametrize("case", SOLVE_CASES)
def test_reordered_solution_list_passes_check_all(case):
    lines = case.solutions.split("\n")[:-1]
    reordered = "".join(line + "\n" for line in reversed(lines))
    assert check_all(reordered, case.solutions) is True


def test_wrong_solution_fails_check_one():
    expected = SOLVE_CASES[3].solutions
    assert check_one("R2 D' R' D R' B2 L U' L' B'\n", expected) is False


def test_actual_longer_than_expected_fails_check_one():
    assert check_one("U R' D R U' R' D' R U2\n", "U R\n") is False


def test_prefix_of_expected_line_passes_check_one():
    assert check_one("U R' D\n", SOLVE_CASES[0].solutions) is True


def test_check_one_empty_expected():
    assert check_one("U\n", "") is False


def test_check_all_length_mismatch():
    expected = SOLVE_CASES[1].solutions
    partial = expected.split("\n")[0] + "\n"
    assert check_all(partial, expected) is False


def test_check_all_same_length_wrong_line():
    expected = SOLVE_CASES[0].solutions
    lines = expected.split("\n")
    wrong = "U R' D R U' R' D' L\n" + lines[1] + "\n"
    assert len(wrong) == len(expected)
    assert check_all(wrong, expected) is False


def test_check_all_duplicate_line_counts_twice():
    expected = SOLVE_CASES[0].solutions
    first = expected.split("\n")[0]
    # Same length as expected only if both lines are the same length.
    duplicated = first + "\n" + first + "\n"
    if len(duplicated) == len(expected):
        assert check_all(duplicated, expected) is True
    else:
        assert check_all(duplicated, expected) is False


def test_scrambles_keep_their_joined_text():
    joined = SOLVE_CASES[4].scramble
    assert "B2D'" in joined
    assert "UR'" in SOLVE_CASES[6].scramble
    assert check_one("B2D'\n", joined + "\n") is False
    assert check_all(joined + "\n", joined + "\n") is True