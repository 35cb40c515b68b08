import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from names_data import BABY_NAMES, BOY_NAMES, GIRL_NAMES
from numerology import NumerologyResult, calculate_numerology
from phonology import Difficulty, classify_difficulty

logger = logging.getLogger(__name__)

BASE_SCORE = 50
CHALDEAN_MATCH_BONUS = 20
PYTHAGOREAN_MATCH_BONUS = 15
EASY_BONUS = 10
HARD_PENALTY = 5
DEFAULT_LIMIT = 24

GENDERS = {
    "male": frozenset(BOY_NAMES),
    "female": frozenset(GIRL_NAMES),
}


@dataclass(frozen=True)
class NameSuggestion:
    name: str
    numerology: NumerologyResult
    difficulty: Difficulty
    score: int
    reasons: Tuple[str, ...]


# --- Name Suggestion Engine Class ---
class NameSuggestionEngine:
    @staticmethod
    def score_candidate(name: str, target_number: Optional[int] = None) -> NameSuggestion:
        """Scores one candidate: numerology matches and easy pronunciation raise it."""
        numerology = calculate_numerology(name)
        difficulty = classify_difficulty(name)
        score = BASE_SCORE
        reasons = []

        if target_number is not None:
            if numerology.chaldean.value == target_number:
                score += CHALDEAN_MATCH_BONUS
                reasons.append(f"Chaldean numerology: {numerology.chaldean.value}")
            if numerology.pythagorean.value == target_number:
                score += PYTHAGOREAN_MATCH_BONUS
                reasons.append(f"Pythagorean numerology: {numerology.pythagorean.value}")

        if difficulty == Difficulty.EASY:
            score += EASY_BONUS
            reasons.append("Easy to pronounce")
        elif difficulty == Difficulty.HARD:
            score -= HARD_PENALTY

        return NameSuggestion(
            name=name,
            numerology=numerology,
            difficulty=difficulty,
            score=max(0, min(100, score)),
            reasons=tuple(reasons),
        )

    @staticmethod
    def rank(candidates: Optional[Iterable[str]] = None,
             target_number: Optional[int] = None,
             difficulty: Optional[Difficulty] = None,
             min_length: int = 2,
             max_length: int = 12,
             query: Optional[str] = None,
             gender: Optional[str] = None,
             limit: int = DEFAULT_LIMIT) -> List[NameSuggestion]:
        """
        Filters a candidate corpus and returns the best-scoring names.

        Candidates default to the bundled sample corpus. A target number keeps
        only names whose Chaldean or Pythagorean value equals it. Ties are
        broken alphabetically so the ordering is stable.
        """
        names = list(dict.fromkeys(candidates if candidates is not None else BABY_NAMES))

        if query and query.strip():
            needle = query.strip().lower()
            names = [name for name in names if needle in name.lower()]

        if gender in GENDERS:
            names = [name for name in names if name in GENDERS[gender]]

        names = [name for name in names if min_length <= len(name) <= max_length]

        if difficulty is not None:
            difficulty = Difficulty(difficulty)
            names = [name for name in names if classify_difficulty(name) == difficulty]

        suggestions = [NameSuggestionEngine.score_candidate(name, target_number) for name in names]

        if target_number is not None:
            suggestions = [
                suggestion for suggestion in suggestions
                if target_number in (suggestion.numerology.chaldean.value, suggestion.numerology.pythagorean.value)
            ]

        suggestions.sort(key=lambda suggestion: (-suggestion.score, suggestion.name))
        logger.info(f"Ranked {len(suggestions)} name suggestions (target={target_number}, difficulty={difficulty})")
        return suggestions[:limit]
