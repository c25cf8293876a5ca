import pytest

from ingredient_search.similarity import edit_similarity, levenshtein


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("", "abc", 3),
        ("abc", "", 3),
        ("abc", "abc", 0),
        ("ca chua", "ca chau", 2),
        ("rau mong", "rau muong", 1),
    ],
)
def test_levenshtein_known_distances(a: str, b: str, expected: int) -> None:
    assert levenshtein(a, b) == expected
    assert levenshtein(b, a) == expected


def test_edit_similarity_bounds() -> None:
    assert edit_similarity("", "") == 1.0
    assert edit_similarity("abc", "xyz") == 0.0
    assert edit_similarity("thit bo", "thit bu") == pytest.approx(1 - 1 / 7)


def test_edit_similarity_degrades_monotonically() -> None:
    base = "abcdefgh"
    scores = [edit_similarity(base, "z" * k + base[k:]) for k in range(len(base) + 1)]
    assert scores == [pytest.approx(1 - k / len(base)) for k in range(len(base) + 1)]
    assert all(later <= earlier for earlier, later in zip(scores, scores[1:]))
