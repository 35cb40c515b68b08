import datetime
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class NumerologySystem(str, Enum):
    CHALDEAN = "chaldean"
    PYTHAGOREAN = "pythagorean"


# No letter maps to 9 in the Chaldean system; 9 is only reached by reduction.
CHALDEAN_MAP = {
    'A': 1, 'I': 1, 'J': 1, 'Q': 1, 'Y': 1,
    'B': 2, 'K': 2, 'R': 2,
    'C': 3, 'G': 3, 'L': 3, 'S': 3,
    'D': 4, 'M': 4, 'T': 4,
    'E': 5, 'H': 5, 'N': 5, 'X': 5,
    'U': 6, 'V': 6, 'W': 6,
    'O': 7, 'Z': 7,
    'F': 8, 'P': 8,
}

PYTHAGOREAN_MAP = {
    'A': 1, 'J': 1, 'S': 1,
    'B': 2, 'K': 2, 'T': 2,
    'C': 3, 'L': 3, 'U': 3,
    'D': 4, 'M': 4, 'V': 4,
    'E': 5, 'N': 5, 'W': 5,
    'F': 6, 'O': 6, 'X': 6,
    'G': 7, 'P': 7, 'Y': 7,
    'H': 8, 'Q': 8, 'Z': 8,
    'I': 9, 'R': 9,
}

MASTER_NUMBERS = frozenset({11, 22, 33})
SACRED_NUMBER = 9

AVOIDABLE_NUMBERS = frozenset({
    4, 7, 8, 13, 16, 17, 18, 22, 25, 26, 28, 29, 31, 35,
    38, 40, 43, 44, 47, 48, 52, 53, 56, 61, 62, 80,
})

VOWELS = frozenset('AEIOU')

UNKNOWN_MEANING = "Unknown meaning."

NUMBER_MEANINGS = {
    NumerologySystem.CHALDEAN: {
        1: "Ruled by the Sun. Leadership, originality and a strong will to succeed on one's own terms.",
        2: "Ruled by the Moon. Gentle, imaginative and cooperative, with a deep need for harmony.",
        3: "Ruled by Jupiter. Expansive, optimistic and creative, blessed with wisdom and good fortune.",
        4: "Ruled by Rahu. Unconventional and hardworking, but prone to sudden reversals and isolation.",
        5: "Ruled by Mercury. Quick-witted, versatile and communicative, drawn to change and travel.",
        6: "Ruled by Venus. Loving, artistic and devoted to home, beauty and responsibility.",
        7: "Ruled by Ketu. Mystical, introspective and philosophical, guided by intuition.",
        8: "Ruled by Saturn. Disciplined and ambitious, success comes late and through perseverance.",
        9: "Ruled by Mars. The sacred number: courageous, humanitarian and complete in itself.",
        11: "Master number of spiritual insight. Visionary intuition that must be grounded to flourish.",
        22: "Master builder. The power to turn great ideals into lasting, practical achievements.",
        33: "Master teacher. Compassion and healing offered in service of others.",
    },
    NumerologySystem.PYTHAGOREAN: {
        1: "Leadership, independence and innovation.",
        2: "Cooperation, diplomacy and harmony.",
        3: "Creativity, expression and communication.",
        4: "Stability, organization and hard work.",
        5: "Adventure, freedom and versatility.",
        6: "Responsibility, nurturing and balance.",
        7: "Spirituality, analysis and wisdom.",
        8: "Ambition, material success and authority.",
        9: "Humanitarianism, completion and compassion.",
        11: "Intuitive, inspirational and visionary (Master Number).",
        22: "Master builder, practical visionary (Master Number).",
        33: "Master teacher, compassionate healer (Master Number).",
    },
}

CHARACTERISTICS = {
    1: ("Independent", "Pioneering", "Determined", "Self-reliant"),
    2: ("Cooperative", "Diplomatic", "Patient", "Supportive"),
    3: ("Creative", "Expressive", "Optimistic", "Social"),
    4: ("Practical", "Organized", "Reliable", "Hardworking"),
    5: ("Adventurous", "Versatile", "Curious", "Dynamic"),
    6: ("Responsible", "Nurturing", "Caring", "Balanced"),
    7: ("Analytical", "Spiritual", "Intuitive", "Thoughtful"),
    8: ("Ambitious", "Materialistic", "Authoritative", "Goal-oriented"),
    9: ("Humanitarian", "Compassionate", "Wise", "Generous"),
}

COMPATIBLE_NUMBERS = {
    1: (1, 5, 7),
    2: (2, 4, 8),
    3: (3, 6, 9),
    4: (2, 4, 8),
    5: (1, 5, 7),
    6: (3, 6, 9),
    7: (1, 5, 7),
    8: (2, 4, 8),
    9: (3, 6, 9),
}

WARNINGS = {
    1: ("May be too independent", "Can be stubborn"),
    2: ("May be too dependent", "Can be indecisive"),
    3: ("May be scattered", "Can be superficial"),
    4: ("May be too rigid", "Can be inflexible"),
    5: ("May be restless", "Can be irresponsible"),
    6: ("May be overprotective", "Can be controlling"),
    7: ("May be too analytical", "Can be withdrawn"),
    8: ("May be too materialistic", "Can be ruthless"),
    9: ("May be too idealistic", "Can be impractical"),
}

# Score by absolute difference between two numbers; anything further apart scores 10.
COMPATIBILITY_BY_DIFFERENCE = {0: 100, 1: 80, 2: 60, 3: 40, 4: 20}
MIN_COMPATIBILITY = 10

MAX_LUCKY_NUMBERS = 5


@dataclass(frozen=True)
class LetterValue:
    letter: str
    chaldean_value: int
    pythagorean_value: int


@dataclass(frozen=True)
class NumerologySystemResult:
    value: int
    breakdown: Tuple[LetterValue, ...]
    is_master_number: bool
    total: int = 0
    is_sacred_number: Optional[bool] = None


@dataclass(frozen=True)
class NumerologyResult:
    chaldean: NumerologySystemResult
    pythagorean: NumerologySystemResult


@dataclass(frozen=True)
class CoreNumbers:
    life_path: int
    destiny: int
    soul: int
    personality: int
    radical: int


def clean_name(name: str) -> str:
    """Uppercases the name and drops every character outside A-Z."""
    return re.sub(r'[^A-Z]', '', (name or '').upper())


def digit_sum(number: int) -> int:
    return sum(int(digit) for digit in str(abs(number)))


def reduce_number(number: int, preserve_sacred: bool = False) -> int:
    """
    Reduces a sum to a single digit by repeated digit summation.

    Master numbers (11, 22, 33) stop the reduction as soon as they appear,
    including when the starting sum is already one. With ``preserve_sacred``
    (Chaldean), reaching 9 stops the reduction as well.
    """
    while True:
        if number in MASTER_NUMBERS:
            return number
        if preserve_sacred and number == SACRED_NUMBER:
            return number
        if number <= 9:
            return number
        number = digit_sum(number)


def digital_root(number: int) -> int:
    """Plain single-digit reduction; master numbers are reduced too."""
    while number > 9:
        number = digit_sum(number)
    return number


def _zero_result() -> NumerologyResult:
    return NumerologyResult(
        chaldean=NumerologySystemResult(
            value=0, breakdown=(), is_master_number=False, total=0, is_sacred_number=False
        ),
        pythagorean=NumerologySystemResult(
            value=0, breakdown=(), is_master_number=False, total=0
        ),
    )


def calculate_numerology(name: str) -> NumerologyResult:
    """
    Computes the Chaldean and Pythagorean name numbers.

    Non-letters are ignored and case does not matter. A name without any
    A-Z letter yields the zero result rather than an error.
    """
    cleaned = clean_name(name)
    if not cleaned:
        logger.debug("No letters in %r, returning zero numerology result", name)
        return _zero_result()

    breakdown = tuple(
        LetterValue(letter=letter, chaldean_value=CHALDEAN_MAP[letter], pythagorean_value=PYTHAGOREAN_MAP[letter])
        for letter in cleaned
    )
    chaldean_sum = sum(item.chaldean_value for item in breakdown)
    pythagorean_sum = sum(item.pythagorean_value for item in breakdown)

    chaldean_value = reduce_number(chaldean_sum, preserve_sacred=True)
    pythagorean_value = reduce_number(pythagorean_sum)

    return NumerologyResult(
        chaldean=NumerologySystemResult(
            value=chaldean_value,
            breakdown=breakdown,
            is_master_number=chaldean_value in MASTER_NUMBERS,
            total=chaldean_sum,
            is_sacred_number=chaldean_value == SACRED_NUMBER,
        ),
        pythagorean=NumerologySystemResult(
            value=pythagorean_value,
            breakdown=breakdown,
            is_master_number=pythagorean_value in MASTER_NUMBERS,
            total=pythagorean_sum,
        ),
    )


def get_numerological_meaning(number: int, system: Union[NumerologySystem, str] = NumerologySystem.CHALDEAN) -> str:
    """Returns the fixed description for a number, or the unknown-meaning sentinel."""
    try:
        system = NumerologySystem(system)
    except ValueError:
        return UNKNOWN_MEANING
    return NUMBER_MEANINGS[system].get(number, UNKNOWN_MEANING)


def get_characteristics(number: int) -> Tuple[str, ...]:
    return CHARACTERISTICS.get(number, ())


def get_compatible_numbers(number: int) -> Tuple[int, ...]:
    return COMPATIBLE_NUMBERS.get(number, ())


def get_warnings(number: int) -> Tuple[str, ...]:
    return WARNINGS.get(number, ())


def check_numerological_compatibility(first: int, second: int) -> int:
    """Scores two numbers 0-100 by how far apart they are."""
    return COMPATIBILITY_BY_DIFFERENCE.get(abs(first - second), MIN_COMPATIBILITY)


def generate_lucky_numbers(main_number: int) -> Tuple[int, ...]:
    lucky = [main_number]

    if main_number > 9:
        reduced = digital_root(main_number)
        if reduced not in lucky:
            lucky.append(reduced)

    complement = 10 - (main_number % 10)
    if complement > 0 and complement != main_number:
        lucky.append(complement)

    return tuple(lucky[:MAX_LUCKY_NUMBERS])


def is_avoidable_number(number: Optional[int]) -> bool:
    return number in AVOIDABLE_NUMBERS


def _parse_birth_date(date_of_birth: Union[str, datetime.date]) -> Optional[Tuple[int, int, int]]:
    """Returns the three numeric date parts, in written order, or None when the date cannot be read."""
    if isinstance(date_of_birth, datetime.date):
        return date_of_birth.year, date_of_birth.month, date_of_birth.day

    text = (date_of_birth or '').strip()
    if '/' in text:
        parts = text.split('/')
    elif '-' in text:
        parts = text.split('-')
    else:
        return None

    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        return None

    first, second, third = (int(part) for part in parts)
    return first, second, third


def calculate_life_path_number(date_of_birth: Optional[Union[str, datetime.date]]) -> int:
    """
    Life Path number: day + month + year, reduced keeping master numbers.

    Accepts any three numeric parts split by "-" or "/" (YYYY-MM-DD,
    DD/MM/YYYY, MM-DD-YYYY...) or a date object; only their sum matters,
    so the part order is never guessed. Anything else gives 0.
    """
    if not date_of_birth:
        return 0
    parsed = _parse_birth_date(date_of_birth)
    if parsed is None:
        logger.debug("Could not parse date of birth %r", date_of_birth)
        return 0
    return reduce_number(sum(parsed))


def _chaldean_sum(letters: str) -> int:
    return sum(CHALDEAN_MAP.get(letter, 0) for letter in letters)


def calculate_core_numbers(name: str, date_of_birth: Optional[Union[str, datetime.date]] = None) -> CoreNumbers:
    """Chaldean core numbers for a full name, plus the Life Path when a birth date is given."""
    words = [clean_name(part) for part in (name or '').split()]
    words = [word for word in words if word]
    full_name = ''.join(words)
    first_name = words[0] if words else ''

    vowel_letters = ''.join(letter for letter in full_name if letter in VOWELS)
    consonant_letters = ''.join(letter for letter in full_name if letter not in VOWELS)

    return CoreNumbers(
        life_path=calculate_life_path_number(date_of_birth),
        destiny=reduce_number(_chaldean_sum(full_name)),
        soul=reduce_number(_chaldean_sum(vowel_letters)),
        personality=reduce_number(_chaldean_sum(consonant_letters)),
        radical=reduce_number(_chaldean_sum(first_name)),
    )


def describe_number(number: int, system: NumerologySystem = NumerologySystem.CHALDEAN) -> Dict:
    """Meaning and trait tables for a single number, ready for JSON."""
    return {
        "number": number,
        "system": system.value,
        "meaning": get_numerological_meaning(number, system),
        "characteristics": list(get_characteristics(number)),
        "compatible_numbers": list(get_compatible_numbers(number)),
        "warnings": list(get_warnings(number)),
        "is_master_number": number in MASTER_NUMBERS,
        "is_avoidable": is_avoidable_number(number),
    }
