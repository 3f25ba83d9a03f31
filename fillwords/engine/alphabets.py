import random
from typing import Dict, Optional


DEFAULT_LANG = "en"

# Lowercase letter sets used to fill cells not covered by a placed word
ALPHABETS: Dict[str, str] = {
    "en": "abcdefghijklmnopqrstuvwxyz",
    # Russian: all 33 letters, including ё
    "ru": "абвгдеёжзийклмнопрстуфхцчшщъыьэюя",
    # Belarusian: 32 letters (і and ў, no и/щ/ъ)
    "be": "абвгдеёжзійклмнопрстуўфхцчшыьэюя",
    # Ukrainian: 33 letters (і, ї, є, ґ)
    "uk": "абвгґдеєжзиіїйклмнопрстуфхцчшщьюя",
}

CYRILLIC_LANGS = frozenset({"ru", "be", "uk"})


def get_alphabet(lang: str) -> str:
    """Return the letter set for a language, falling back to English."""
    return ALPHABETS.get(lang, ALPHABETS[DEFAULT_LANG])


def script_for(lang: str) -> str:
    """Writing system a language's words are expected to use."""
    return "cyrillic" if lang in CYRILLIC_LANGS else "latin"


def random_char(lang: str, rng: Optional[random.Random] = None) -> str:
    """
    Pick one random filler character for the given language.

    Args:
        lang: Language code ('en', 'ru', 'be', 'uk'); unknown codes use English
        rng: Optional random generator, the module-level one otherwise

    Returns:
        A single lowercase letter
    """
    return (rng or random).choice(get_alphabet(lang))
