import pytest
from boggle_solver.scoring import score_of, total_score


@pytest.mark.parametrize("length,points", [
    (0, 0), (1, 0), (2, 0),
    (3, 1), (4, 1),
    (5, 2), (6, 3), (7, 5),
    (8, 11), (9, 11), (10, 11), (16, 11),
])
def test_score_by_length(length, points):
    assert score_of("A" * length) == points


def test_qu_counts_as_two_letters():
    assert score_of("QUIT") == 1
    assert score_of("QUIZZES") == 5


def test_total_score():
    assert total_score(["CAT", "CATS"]) == 2
    assert total_score(["CAT", "STARE", "QUIETLY", "QUESTIONS"]) == 1 + 2 + 5 + 11
    assert total_score([]) == 0
