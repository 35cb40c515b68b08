import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from numerology import is_avoidable_number

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class VibrationType(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Tone(str, Enum):
    HARD = "hard"
    SOFT = "soft"
    BALANCED = "balanced"


SYLLABLE_VOWELS = 'aeiouy'
VOWELS = 'aeiou'

DIFFICULT_COMBINATIONS = ('th', 'ch', 'sh', 'ph', 'gh', 'qu', 'x', 'z')
SILENT_LETTERS = ('k', 'w', 'h')
UNCOMMON_LETTERS = ('q', 'x', 'z', 'j')

STRESS_PATTERNS = {
    1: "1",
    2: "1-2",
    3: "1-2-3",
    4: "1-2-3-4",
}
LONGEST_STRESS_PATTERN = "1-2-3-4-5"

# Applied in this order, one global pass per key. Single vowels go first, so
# multi-letter rules such as "qu" only fire when the vowels left them intact.
PHONETIC_REPLACEMENTS = (
    ('a', 'æ'),
    ('e', 'ɛ'),
    ('i', 'ɪ'),
    ('o', 'ɔ'),
    ('u', 'ʌ'),
    ('th', 'θ'),
    ('ch', 'tʃ'),
    ('sh', 'ʃ'),
    ('ph', 'f'),
    ('qu', 'kw'),
    ('x', 'ks'),
    ('z', 'z'),
)

PRONUNCIATION_GUIDE = {
    'a': 'ah', 'e': 'eh', 'i': 'ee', 'o': 'oh', 'u': 'oo',
    'c': 'k', 'q': 'kw', 'x': 'ks',
}

MAX_NICKNAMES = 5

# "SA" and "AD" are left out so that "SAD" cannot score as positive.
POSITIVE_COMBINATIONS = (
    'VS', 'VN', 'WN', 'VG', 'VB', 'VM', 'NV', 'MG', 'MK', 'MV',
    'KS', 'MY', 'PM', 'SV', 'GA', 'AR', 'RA', 'RP', 'JN', 'AV',
    'JA', 'PN', 'CO', 'CP', 'PC', 'MN', 'NM', 'AM', 'RS', 'DA',
    'BA', 'GV', 'CV', 'LK', 'LV', 'AG', 'PK', 'AP', 'AN', 'ARR',
    'HA', 'MP', 'VIN', 'VIND', 'ARARS', 'NJ', 'NS', 'UD', 'RUN', 'GAIN',
)

NEGATIVE_COMBINATIONS = (
    'VK', 'WAR', 'VH', 'VD', 'VO', 'NO', 'DI', 'DHI', 'AS', 'SH',
    'ML', 'MAR', 'KL', 'SR', 'SS', 'AH', 'AI', 'LO', 'RO', 'SC',
    'SK', 'SU', 'END', 'VAR', 'NL', 'VL', 'BO', 'DU', 'MR', 'VR',
    'VC', 'DY', 'NA', 'NE', 'NI', 'MT', 'RJ', 'JR', 'OO', 'AK',
    'IL', 'ER', 'KK', 'DM',
)

NEGATIVE_WORDS = ('SAD', 'LOSS', 'SAT', 'DOWN', 'LESS', 'ILL')

POSITIVE_WEIGHT = 2
MAX_VIBRATION_SCORE = 10

HARD_CONSONANTS = 'bcdgjkpqtxz'
SOFT_CONSONANTS = 'flmnrsvw'
TONE_DOMINANCE_RATIO = 1.5

# Suffix -> note, checked in order.
CULTURAL_SUFFIXES = (
    (('a', 'ia', 'ina'), "Common in Latin/Romance languages"),
    (('son', 'sen'), "Scandinavian origin"),
    (('ski', 'sky'), "Slavic origin"),
    (('ez', 'es'), "Spanish origin"),
    (('ova', 'eva'), "Eastern European origin"),
)


@dataclass(frozen=True)
class VibrationResult:
    type: VibrationType
    positive_combinations: Tuple[str, ...]
    negative_combinations: Tuple[str, ...]
    score: int
    numerology_warning: bool


@dataclass(frozen=True)
class PhonologyAnalysis:
    syllables: int
    pronunciation: str
    difficulty: Difficulty
    stress_pattern: str
    phonetic_transcription: str
    nickname_potential: Tuple[str, ...]
    vibration: VibrationResult


@dataclass(frozen=True)
class SoundSymbolism:
    vowel_count: int
    hard_consonant_count: int
    soft_consonant_count: int
    vowel_consonant_ratio: float
    tone: Tone


@dataclass(frozen=True)
class SoundPatterns:
    alliteration: Tuple[str, ...]
    assonance: Tuple[str, ...]
    rhythm: str
    flow: str


@dataclass(frozen=True)
class EnergyProfile:
    energy: int
    frequency: str
    resonance: str
    harmony: str
    score: int
    rating: str


def _letters_only(name: str) -> str:
    return re.sub(r'[^a-z]', '', (name or '').lower())


def count_syllables(name: str) -> int:
    """Counts vowel groups after dropping one trailing 'e'. Never below 1."""
    word = re.sub(r'e$', '', (name or '').lower())
    return max(1, len(re.findall(r'[aeiouy]+', word)))


def classify_difficulty(name: str) -> Difficulty:
    """
    Scores how hard a name is to pronounce.

    Each check is a plain presence test on the lowercased name, so one
    letter can feed several rules (the 'h' in "th" counts as a difficult
    combination and as a silent letter).
    """
    lowered = (name or '').lower()
    score = 0

    score += 2 * sum(1 for combo in DIFFICULT_COMBINATIONS if combo in lowered)
    score += sum(1 for letter in SILENT_LETTERS if letter in lowered)
    if len(lowered) > 8:
        score += 2
    if len(lowered) > 12:
        score += 3
    score += sum(1 for letter in UNCOMMON_LETTERS if letter in lowered)

    if score <= 2:
        return Difficulty.EASY
    if score <= 5:
        return Difficulty.MEDIUM
    return Difficulty.HARD


def get_stress_pattern(syllables: int) -> str:
    if syllables <= 1:
        return STRESS_PATTERNS[1]
    return STRESS_PATTERNS.get(syllables, LONGEST_STRESS_PATTERN)


def transcribe_phonetically(name: str) -> str:
    transcription = name or ''
    for source, target in PHONETIC_REPLACEMENTS:
        transcription = transcription.replace(source, target)
    return f"/{transcription}/"


def get_pronunciation(name: str) -> str:
    """Letter-by-letter respelling guide, e.g. "Zoe" -> "zoheh"."""
    return ''.join(PRONUNCIATION_GUIDE.get(char, char) for char in _letters_only(name))


def _first_syllable(name: str) -> Optional[str]:
    for index, char in enumerate(name):
        if char.lower() in SYLLABLE_VOWELS:
            return name[:index + 1]
    return None


def generate_nicknames(name: str) -> Tuple[str, ...]:
    name = name or ''
    lowered = name.lower()
    candidates: List[str] = []

    if len(name) >= 3:
        candidates.append(name[:2])
        candidates.append(name[:3])

    first_syllable = _first_syllable(name)
    if first_syllable and first_syllable != name:
        candidates.append(first_syllable)

    if lowered.endswith('y') or lowered.endswith('ie'):
        candidates.append(name[:-1] + 'y')

    if lowered.endswith('er') or lowered.endswith('ar'):
        candidates.append(name[:-2] + 'y')

    # dict keeps first-seen order
    return tuple(dict.fromkeys(candidates))[:MAX_NICKNAMES]


def analyze_vibration(name: str, chaldean_value: Optional[int] = None,
                      pythagorean_value: Optional[int] = None) -> VibrationResult:
    """
    Matches the name against the positive and negative letter-combination lists.

    Matching is substring containment on the uppercased name: "WARM" matches
    the negative "WAR" and overlapping hits all count. Each positive hit is
    worth +2 and each negative hit -1, clamped to [-10, 10].
    """
    upper = (name or '').upper()

    positive = tuple(combo for combo in POSITIVE_COMBINATIONS if combo in upper)
    negative = tuple(combo for combo in NEGATIVE_COMBINATIONS if combo in upper)
    negative += tuple(word for word in NEGATIVE_WORDS if word in upper)

    score = POSITIVE_WEIGHT * len(positive) - len(negative)
    score = max(-MAX_VIBRATION_SCORE, min(MAX_VIBRATION_SCORE, score))

    if score > 0:
        vibration_type = VibrationType.POSITIVE
    elif score < 0:
        vibration_type = VibrationType.NEGATIVE
    else:
        vibration_type = VibrationType.NEUTRAL

    numerology_warning = is_avoidable_number(chaldean_value) or is_avoidable_number(pythagorean_value)

    return VibrationResult(
        type=vibration_type,
        positive_combinations=positive,
        negative_combinations=negative,
        score=score,
        numerology_warning=numerology_warning,
    )


def analyze_phonology(name: str, chaldean_value: Optional[int] = None,
                      pythagorean_value: Optional[int] = None) -> PhonologyAnalysis:
    """
    Full phonology bundle for a name.

    Pass the name's Chaldean and Pythagorean values to have the vibration
    flag avoidable numbers. Empty or odd input still yields a well-formed
    result (one syllable, easy, no nicknames, neutral vibration).
    """
    name = name or ''
    syllables = count_syllables(name)
    analysis = PhonologyAnalysis(
        syllables=syllables,
        pronunciation=get_pronunciation(name),
        difficulty=classify_difficulty(name),
        stress_pattern=get_stress_pattern(syllables),
        phonetic_transcription=transcribe_phonetically(name),
        nickname_potential=generate_nicknames(name),
        vibration=analyze_vibration(name, chaldean_value, pythagorean_value),
    )
    logger.debug("Phonology for %r: %s syllables, %s", name, syllables, analysis.difficulty.value)
    return analysis


def check_rhyme(first: str, second: str) -> bool:
    return (first or '').lower()[-3:] == (second or '').lower()[-3:]


def check_alliteration(first: str, second: str) -> bool:
    if not first or not second:
        return False
    return first[0].lower() == second[0].lower()


def analyze_sound_symbolism(name: str) -> SoundSymbolism:
    lowered = (name or '').lower()
    vowel_count = sum(1 for char in lowered if char in SYLLABLE_VOWELS)
    hard_count = sum(1 for char in lowered if char in HARD_CONSONANTS)
    soft_count = sum(1 for char in lowered if char in SOFT_CONSONANTS)
    consonant_count = hard_count + soft_count

    ratio = vowel_count / consonant_count if consonant_count else 1.0

    if hard_count > TONE_DOMINANCE_RATIO * soft_count:
        tone = Tone.HARD
    elif soft_count > TONE_DOMINANCE_RATIO * hard_count:
        tone = Tone.SOFT
    else:
        tone = Tone.BALANCED

    return SoundSymbolism(
        vowel_count=vowel_count,
        hard_consonant_count=hard_count,
        soft_consonant_count=soft_count,
        vowel_consonant_ratio=ratio,
        tone=tone,
    )


def count_vowels_and_consonants(name: str) -> Tuple[int, int]:
    letters = _letters_only(name)
    vowel_count = sum(1 for char in letters if char in VOWELS)
    return vowel_count, len(letters) - vowel_count


def describe_phonetic_structure(name: str) -> str:
    letters = _letters_only(name)
    notes = []

    if letters[:1] and letters[0] in VOWELS:
        notes.append("Starts with a vowel sound")
    if letters[-1:] and letters[-1] in VOWELS:
        notes.append("Ends with a vowel sound")
    if re.search(r'[bcdfghjklmnpqrstvwxyz]{2,}', letters):
        notes.append("Contains consonant clusters")
    if re.search(r'(.)\1', letters):
        notes.append("Contains double letters")

    return ", ".join(notes) or "Standard phonetic structure"


def get_cultural_notes(name: str) -> Tuple[str, ...]:
    letters = _letters_only(name)
    if not letters:
        return ()
    return tuple(note for suffixes, note in CULTURAL_SUFFIXES if letters.endswith(suffixes))


def analyze_sound_patterns(name: str) -> SoundPatterns:
    letters = _letters_only(name)
    alliteration = []
    assonance = []

    for current, following in zip(letters, letters[1:]):
        if current != following:
            continue
        if current in VOWELS:
            assonance.append(current + following)
        else:
            alliteration.append(current + following)

    syllables = count_syllables(letters)
    if syllables > 3:
        rhythm = "Complex"
    elif syllables == 1:
        rhythm = "Simple"
    else:
        rhythm = "Steady"

    flow = "Smooth"
    if 'x' in letters or 'z' in letters:
        flow = "Sharp"
    if 'l' in letters or 'm' in letters:
        flow = "Flowing"

    return SoundPatterns(
        alliteration=tuple(alliteration),
        assonance=tuple(assonance),
        rhythm=rhythm,
        flow=flow,
    )


def calculate_energy_profile(name: str) -> EnergyProfile:
    """
    Heuristic energy reading: vowels weigh double, consonants single.

    The 0-100 score starts at 50 and adds points for energy, frequency,
    resonance and harmony bands.
    """
    letters = _letters_only(name)
    vowel_count, consonant_count = count_vowels_and_consonants(letters)
    energy = 2 * vowel_count + consonant_count

    if energy > 15:
        frequency = "High"
    elif energy > 10:
        frequency = "Medium"
    else:
        frequency = "Low"

    resonance = "Gentle"
    if 'r' in letters or 'l' in letters:
        resonance = "Strong"
    if 'm' in letters or 'n' in letters:
        resonance = "Soft"

    vowel_ratio = vowel_count / len(letters) if letters else 0.0
    if vowel_ratio > 0.5:
        harmony = "Melodic"
    elif vowel_ratio < 0.3:
        harmony = "Rhythmic"
    else:
        harmony = "Balanced"

    score = 50
    if 10 <= energy <= 20:
        score += 20
    elif energy > 20:
        score += 10
    else:
        score -= 10
    score += {"High": 15, "Medium": 10, "Low": 5}[frequency]
    score += {"Strong": 15, "Soft": 10, "Gentle": 5}[resonance]
    score += {"Melodic": 15, "Balanced": 10, "Rhythmic": 5}[harmony]
    score = max(0, min(100, score))

    if score >= 80:
        rating = "Excellent"
    elif score >= 70:
        rating = "Good"
    elif score >= 60:
        rating = "Fair"
    elif score >= 50:
        rating = "Average"
    else:
        rating = "Poor"

    return EnergyProfile(
        energy=energy,
        frequency=frequency,
        resonance=resonance,
        harmony=harmony,
        score=score,
        rating=rating,
    )


def summarize_vibration(vibration: VibrationResult) -> Dict[str, str]:
    """Short human-readable verdict for a vibration result."""
    if vibration.type == VibrationType.POSITIVE:
        verdict = "This name carries a positive vibration from its letter combinations."
    elif vibration.type == VibrationType.NEGATIVE:
        verdict = "This name contains letter combinations associated with a negative vibration."
    else:
        verdict = "This name has a neutral, balanced vibration."

    summary = {"verdict": verdict}
    if vibration.numerology_warning:
        summary["warning"] = "This name contains avoidable numerology numbers that may bring challenges."
    return summary
