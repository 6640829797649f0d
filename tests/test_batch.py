"""Tests for the strfry.batch module.

Covers similarity, best_matches, pairwise, similarity_matrix,
phonetic_groups and the MatchResult type.
"""

import logging

import pytest

import strfry as sf
from strfry import batch


class TestMatchResult:
    """Tests for the MatchResult dataclass."""

    def test_fields(self):
        result = sf.MatchResult("hello", 0.9, 3)
        assert result.text == "hello"
        assert result.score == 0.9
        assert result.id == 3

    def test_id_defaults_to_none(self):
        assert sf.MatchResult("hello", 1.0).id is None

    def test_hashable_and_comparable(self):
        a = sf.MatchResult("hello", 0.5, 0)
        b = sf.MatchResult("hello", 0.5, 0)
        assert a == b
        assert len({a, b}) == 1

    def test_frozen(self):
        result = sf.MatchResult("hello", 0.5)
        with pytest.raises(AttributeError):
            result.score = 1.0


class TestSimilarity:
    """Tests for batch.similarity."""

    def test_preserves_input_order(self):
        strings = ["hello", "hallo", "world"]
        results = batch.similarity(strings, "helo", algorithm="levenshtein")
        assert [r.text for r in results] == strings
        assert [r.id for r in results] == [0, 1, 2]
        assert [round(r.score, 2) for r in results] == [0.8, 0.6, 0.2]

    def test_scores_match_single_pair_functions(self):
        strings = ["MARHTA", "martha", "marta"]
        results = batch.similarity(strings, "MARTHA")
        for r in results:
            assert r.score == sf.jaro_winkler("MARTHA", r.text)

    def test_enum_algorithm(self):
        results = batch.similarity(["abc"], "abd", algorithm=sf.Algorithm.JARO)
        assert results[0].score == sf.jaro_distance("abd", "abc")

    def test_hamming_unequal_lengths_score_zero(self):
        results = batch.similarity(["abc", "abcd", "abd"], "abc", algorithm="hamming")
        assert [r.score for r in results] == pytest.approx([1.0, 0.0, 2 / 3])

    def test_empty_input(self):
        assert batch.similarity([], "query") == []

    def test_unknown_algorithm(self):
        with pytest.raises(sf.AlgorithmError):
            batch.similarity(["a"], "a", algorithm="cosine")

    def test_non_str_elements_rejected(self):
        with pytest.raises(TypeError):
            batch.similarity(["a", None], "a")
        with pytest.raises(TypeError):
            batch.similarity(["a"], 1)


class TestBestMatches:
    """Tests for batch.best_matches."""

    def test_top_matches(self):
        matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
        assert [m.text for m in matches] == ["apple", "apply"]

    def test_sorted_descending(self):
        strings = ["world", "hello", "help", "hallo"]
        matches = batch.best_matches(strings, "hello", limit=10)
        scores = [m.score for m in matches]
        assert scores == sorted(scores, reverse=True)
        assert matches[0].text == "hello"
        assert matches[0].score == 1.0

    def test_ties_keep_input_order(self):
        matches = batch.best_matches(["abc", "xyz", "abc"], "abc", limit=3)
        assert [m.id for m in matches] == [0, 2, 1]

    def test_limit(self):
        strings = [f"item{i}" for i in range(20)]
        assert len(batch.best_matches(strings, "item", limit=3)) == 3
        assert len(batch.best_matches(strings, "item")) == 5

    def test_min_similarity_filters(self):
        matches = batch.best_matches(
            ["hello", "world", "help"], "hello", algorithm="levenshtein", min_similarity=0.5
        )
        assert [m.text for m in matches] == ["hello", "help"]
        assert all(m.score >= 0.5 for m in matches)

    def test_min_similarity_excludes_everything(self):
        assert batch.best_matches(["abc"], "xyz", min_similarity=1.0) == []

    def test_invalid_limit(self):
        with pytest.raises(sf.ValidationError):
            batch.best_matches(["a"], "a", limit=0)
        with pytest.raises(sf.ValidationError):
            batch.best_matches(["a"], "a", limit=-1)
        with pytest.raises(sf.ValidationError):
            batch.best_matches(["a"], "a", limit=True)

    def test_invalid_min_similarity(self):
        with pytest.raises(sf.ValidationError):
            batch.best_matches(["a"], "a", min_similarity=1.5)
        with pytest.raises(sf.ValidationError):
            batch.best_matches(["a"], "a", min_similarity=float("nan"))

    def test_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="strfry.batch"):
            batch.best_matches(["apple", "banana"], "apple", min_similarity=0.9)
        assert "1 of 2 candidates" in caplog.text


class TestPairwise:
    """Tests for batch.pairwise."""

    def test_pairwise(self):
        scores = batch.pairwise(["kitten", "abc"], ["sitting", "abc"], algorithm="levenshtein")
        assert scores == pytest.approx([1 - 3 / 7, 1.0])

    def test_pairwise_default_algorithm(self):
        scores = batch.pairwise(["MARTHA"], ["MARHTA"])
        assert scores == [sf.jaro_winkler("MARTHA", "MARHTA")]

    def test_pairwise_empty(self):
        assert batch.pairwise([], []) == []

    def test_length_mismatch(self):
        with pytest.raises(sf.ValidationError, match="same length"):
            batch.pairwise(["a", "b"], ["a"])


class TestSimilarityMatrix:
    """Tests for batch.similarity_matrix."""

    def test_shape(self):
        matrix = batch.similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        assert len(matrix) == 2
        assert all(len(row) == 3 for row in matrix)

    def test_values(self):
        queries = ["hello", "world"]
        choices = ["hallo", "word"]
        matrix = batch.similarity_matrix(queries, choices)
        for i, q in enumerate(queries):
            for j, c in enumerate(choices):
                assert matrix[i][j] == sf.levenshtein_similarity(q, c)

    def test_diagonal_is_one(self):
        words = ["alpha", "beta", "gamma"]
        matrix = batch.similarity_matrix(words, words, algorithm="jaro")
        assert [matrix[i][i] for i in range(3)] == [1.0, 1.0, 1.0]

    def test_empty(self):
        assert batch.similarity_matrix([], ["a"]) == []
        assert batch.similarity_matrix(["a"], []) == [[]]


class TestPhoneticGroups:
    """Tests for batch.phonetic_groups."""

    def test_soundex_groups(self):
        groups = batch.phonetic_groups(["Robert", "Rupert", "Rubin"])
        assert groups == {"R163": ["Robert", "Rupert"], "R150": ["Rubin"]}

    def test_metaphone_groups(self):
        groups = batch.phonetic_groups(["phone", "fone", "knight", "night"], algorithm="metaphone")
        assert groups == {"FN": ["phone", "fone"], "NT": ["knight", "night"]}

    def test_enum_algorithm(self):
        groups = batch.phonetic_groups(["Smith", "Smyth"], algorithm=sf.PhoneticAlgorithm.SOUNDEX)
        assert groups == {"S530": ["Smith", "Smyth"]}

    def test_strings_without_letters_skipped(self):
        assert batch.phonetic_groups(["", "123", "Lee"]) == {"L000": ["Lee"]}
        assert batch.phonetic_groups(["", "!!"], algorithm="metaphone") == {}

    def test_unknown_algorithm(self):
        with pytest.raises(sf.AlgorithmError):
            batch.phonetic_groups(["a"], algorithm="nysiis")


class TestGetScorer:
    """Tests for batch.get_scorer."""

    def test_known_scorers(self):
        assert batch.get_scorer("jaro") is sf.jaro_distance
        assert batch.get_scorer("JARO_WINKLER") is sf.jaro_winkler
        assert batch.get_scorer(sf.Algorithm.LEVENSHTEIN) is sf.levenshtein_similarity

    def test_hamming_scorer_tolerates_length_mismatch(self):
        scorer = batch.get_scorer("hamming")
        assert scorer("abc", "abcd") == 0.0
        assert scorer("abc", "abc") == 1.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
