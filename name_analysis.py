import dataclasses
import datetime
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from numerology import (
    CoreNumbers,
    NumerologyResult,
    NumerologySystem,
    calculate_core_numbers,
    calculate_numerology,
    check_numerological_compatibility,
    clean_name,
    describe_number,
    generate_lucky_numbers,
)
from phonology import (
    EnergyProfile,
    PhonologyAnalysis,
    SoundPatterns,
    SoundSymbolism,
    analyze_phonology,
    analyze_sound_patterns,
    analyze_sound_symbolism,
    calculate_energy_profile,
    check_alliteration,
    check_rhyme,
    count_vowels_and_consonants,
    describe_phonetic_structure,
    get_cultural_notes,
    summarize_vibration,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SoundProfile:
    vowel_count: int
    consonant_count: int
    structure: str
    cultural_notes: Tuple[str, ...]
    symbolism: SoundSymbolism
    patterns: SoundPatterns
    energy: EnergyProfile


@dataclass(frozen=True)
class NameAnalysis:
    name: str
    date_of_birth: Optional[str]
    numerology: NumerologyResult
    phonology: PhonologyAnalysis
    core_numbers: CoreNumbers
    lucky_numbers: Tuple[int, ...]
    sound_profile: SoundProfile

    @property
    def has_letters(self) -> bool:
        return bool(self.numerology.chaldean.breakdown)

    def to_dict(self) -> Dict[str, Any]:
        data = to_json_ready(self)
        data["has_letters"] = self.has_letters
        data["interpretation"] = {
            NumerologySystem.CHALDEAN.value: describe_number(
                self.numerology.chaldean.value, NumerologySystem.CHALDEAN
            ),
            NumerologySystem.PYTHAGOREAN.value: describe_number(
                self.numerology.pythagorean.value, NumerologySystem.PYTHAGOREAN
            ),
            "vibration": summarize_vibration(self.phonology.vibration),
        }
        return data


def to_json_ready(value: Any) -> Any:
    """Turns result dataclasses into plain dicts, lists and strings."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: to_json_ready(getattr(value, field.name)) for field in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_json_ready(item) for item in value]
    if isinstance(value, dict):
        return {key: to_json_ready(item) for key, item in value.items()}
    return value


def analyze_sound_profile(name: str) -> SoundProfile:
    vowel_count, consonant_count = count_vowels_and_consonants(name)
    return SoundProfile(
        vowel_count=vowel_count,
        consonant_count=consonant_count,
        structure=describe_phonetic_structure(name),
        cultural_notes=get_cultural_notes(name),
        symbolism=analyze_sound_symbolism(name),
        patterns=analyze_sound_patterns(name),
        energy=calculate_energy_profile(name),
    )


def analyze_name(name: str, date_of_birth: Optional[Union[str, datetime.date]] = None) -> NameAnalysis:
    """
    Runs the whole engine on one name.

    Numerology runs first so that the phonology vibration can flag avoidable
    Chaldean and Pythagorean values. Lucky numbers derive from the Chaldean
    value. The result is a pure function of the arguments.
    """
    name = name or ''
    numerology = calculate_numerology(name)
    phonology = analyze_phonology(name, numerology.chaldean.value, numerology.pythagorean.value)

    if isinstance(date_of_birth, datetime.date):
        date_of_birth = date_of_birth.isoformat()

    analysis = NameAnalysis(
        name=name,
        date_of_birth=date_of_birth or None,
        numerology=numerology,
        phonology=phonology,
        core_numbers=calculate_core_numbers(name, date_of_birth),
        lucky_numbers=generate_lucky_numbers(numerology.chaldean.value) if numerology.chaldean.value else (),
        sound_profile=analyze_sound_profile(name),
    )
    logger.debug(
        "Analyzed %r: chaldean=%s pythagorean=%s vibration=%s",
        name, numerology.chaldean.value, numerology.pythagorean.value, phonology.vibration.type.value,
    )
    return analysis


def compare_names(first_name: str, second_name: str) -> Dict[str, Any]:
    """Numerological and sound compatibility between two names."""
    first = calculate_numerology(first_name)
    second = calculate_numerology(second_name)

    return {
        "first_name": first_name,
        "second_name": second_name,
        "chaldean": {
            "first": first.chaldean.value,
            "second": second.chaldean.value,
            "score": check_numerological_compatibility(first.chaldean.value, second.chaldean.value),
        },
        "pythagorean": {
            "first": first.pythagorean.value,
            "second": second.pythagorean.value,
            "score": check_numerological_compatibility(first.pythagorean.value, second.pythagorean.value),
        },
        "rhyme": check_rhyme(clean_name(first_name), clean_name(second_name)),
        "alliteration": check_alliteration(clean_name(first_name), clean_name(second_name)),
    }
