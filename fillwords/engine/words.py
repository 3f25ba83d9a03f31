"""Word-pool preparation: turn raw caller-supplied words into placement candidates."""

import random
import re
from typing import Iterable, List, Optional

from .alphabets import DEFAULT_LANG, script_for
from .levels import get_level


_SCRIPT_PATTERNS = {
    "latin": re.compile(r'^[a-z]+$'),
    "cyrillic": re.compile(r'^[\u0400-\u04FF]+$'),
}


def parse_custom_words(raw: str) -> List[str]:
    """Split a comma-separated string into lowercase words of two letters or more."""
    words = [w.strip().lower() for w in (raw or "").split(',')]
    return [w for w in words if len(w) >= 2]


def is_valid_word(word: str, min_len: int, max_len: int, lang: str = DEFAULT_LANG) -> bool:
    """
    Check a candidate word for a puzzle.

    The trimmed, lowercased word must have a length within [min_len, max_len]
    and contain only letters of the language's script (no spaces, digits or
    hyphens).
    """
    if not isinstance(word, str):
        return False
    w = word.strip().lower()
    if len(w) < min_len or len(w) > max_len:
        return False
    return bool(_SCRIPT_PATTERNS[script_for(lang)].match(w))


def select_words(
    candidates: Iterable[str],
    level: str,
    lang: str = DEFAULT_LANG,
    count: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Pick the words for one puzzle.

    Keeps words valid for the level's length range and the language's script,
    drops case-insensitive duplicates (first occurrence wins), shuffles, and
    returns at most `count` words (the level's word count by default).
    """
    cfg = get_level(level)
    limit = cfg.word_count if count is None else count

    seen = set()
    pool: List[str] = []
    for word in candidates:
        if not is_valid_word(word, cfg.word_length_min, cfg.word_length_max, lang):
            continue
        w = word.strip().lower()
        if w in seen:
            continue
        seen.add(w)
        pool.append(w)

    (rng or random).shuffle(pool)
    return pool[:limit]
