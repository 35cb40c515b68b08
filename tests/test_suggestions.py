from names_data import GIRL_NAMES
from phonology import Difficulty
from suggestions import NameSuggestionEngine


def test_rank_orders_by_score_then_name():
    suggestions = NameSuggestionEngine.rank(candidates=["Zachary", "Thomas", "Aarav"])

    assert [suggestion.name for suggestion in suggestions] == ["Aarav", "Thomas", "Zachary"]
    assert [suggestion.score for suggestion in suggestions] == [60, 50, 45]
    assert suggestions[2].difficulty == Difficulty.HARD


def test_target_number_keeps_matching_names_only():
    suggestions = NameSuggestionEngine.rank(candidates=["Aarav", "Thomas"], target_number=11)

    assert len(suggestions) == 1
    assert suggestions[0].name == "Aarav"
    assert suggestions[0].score == 80
    assert suggestions[0].reasons == ("Chaldean numerology: 11", "Easy to pronounce")


def test_pythagorean_target_match():
    suggestions = NameSuggestionEngine.rank(candidates=["Thomas"], target_number=22)

    assert suggestions[0].score == 65
    assert suggestions[0].reasons == ("Pythagorean numerology: 22",)


def test_difficulty_filter_accepts_strings():
    suggestions = NameSuggestionEngine.rank(candidates=["Aarav", "Thomas", "Zachary"], difficulty="hard")

    assert [suggestion.name for suggestion in suggestions] == ["Zachary"]


def test_length_filter():
    suggestions = NameSuggestionEngine.rank(candidates=["Al", "Alexander", "Christopher"], max_length=9)

    assert [suggestion.name for suggestion in suggestions] == ["Al", "Alexander"]


def test_duplicate_candidates_are_scored_once():
    assert len(NameSuggestionEngine.rank(candidates=["Aarav", "Aarav"])) == 1


def test_default_corpus_with_query_and_limit():
    suggestions = NameSuggestionEngine.rank(query="AR", limit=5)

    assert 0 < len(suggestions) <= 5
    assert all("ar" in suggestion.name.lower() for suggestion in suggestions)


def test_gender_filter_uses_corpus():
    suggestions = NameSuggestionEngine.rank(gender="female", limit=50)

    assert suggestions
    assert all(suggestion.name in GIRL_NAMES for suggestion in suggestions)


def test_scores_are_bounded():
    for suggestion in NameSuggestionEngine.rank(target_number=7, limit=100):
        assert 0 <= suggestion.score <= 100
        assert 7 in (suggestion.numerology.chaldean.value, suggestion.numerology.pythagorean.value)
