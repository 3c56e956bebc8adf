"""
Jarvis quick-order parser.

Turns free-form Hinglish/English chat lines into item intents, e.g.

    "milk 2 packet kar do"     -> milk x2
    "mere liye 3 upma de do"   -> upma x3
    "1 boil egg aur 2 upma"    -> boil egg x1, upma x2
"""
import re
from typing import Iterator, List, Optional, Tuple

from jarvis.services.ordering.constants import (
    FILLER_WORDS,
    HINDI_NUMBERS,
    MAX_QUANTITY,
    MIN_QUANTITY,
)
from jarvis.services.ordering.models import ParsedItem

# Item separators: comma, ampersand, newline, or a spaced "aur"/"and"/"or"
SEGMENT_DELIMITER = re.compile(r"[,&\n]|\s+(?:aur|and|or)\s+", re.IGNORECASE)

# "2", "x2", "×2"
NUMBER_TOKEN = re.compile(r"^[x×]?(\d+)$")

MULTIPLY_SIGNS = ("x", "×")


def iter_segments(text: str) -> Iterator[str]:
    """
    Yield the item clauses of a chat line, trimmed and non-empty.

    Each call starts a fresh pass over ``text``.
    """
    start = 0
    for delimiter in SEGMENT_DELIMITER.finditer(text):
        segment = text[start:delimiter.start()].strip()
        if segment:
            yield segment
        start = delimiter.end()

    tail = text[start:].strip()
    if tail:
        yield tail


def clamp_quantity(quantity: int) -> int:
    """Keep a quantity inside the orderable range."""
    if quantity < MIN_QUANTITY:
        return MIN_QUANTITY
    return min(quantity, MAX_QUANTITY)


def _to_int(digits: str) -> int:
    # Anything this long is over the cap anyway; avoids int() on huge strings
    if len(digits) > 4:
        return MAX_QUANTITY + 1
    return int(digits)


def extract_quantity(text: str) -> Tuple[int, str]:
    """
    Pull at most one quantity signal out of a clause.

    Numerals win over Hindi number words: a leading number ("2 momos") is
    tried first, then a trailing one ("momos x2", "momos × 2"), and only then
    the first Hindi number token ("do momos"). Filler words around the
    numeral are skipped when deciding whether it leads or trails, so
    "mujhe 2 samosa chahiye" and "milk 2 packet kar do" both count.

    Returns:
        Tuple of (clamped quantity, clause text with the signal removed)
    """
    words = text.lower().split()
    content = [index for index, word in enumerate(words) if word not in FILLER_WORDS]

    if content:
        first = content[0]
        if words[first].isdecimal():
            quantity = _to_int(words[first])
            del words[first]
            return clamp_quantity(quantity), " ".join(words)

        last = content[-1]
        trailing = NUMBER_TOKEN.match(words[last])
        if trailing:
            quantity = _to_int(trailing.group(1))
            start = last
            if words[last].isdecimal() and last > 0 and words[last - 1] in MULTIPLY_SIGNS:
                start = last - 1
            del words[start:last + 1]
            return clamp_quantity(quantity), " ".join(words)

    for index, word in enumerate(words):
        if word in HINDI_NUMBERS:
            del words[index]
            return HINDI_NUMBERS[word], " ".join(words)

    return MIN_QUANTITY, " ".join(words)


def strip_filler_words(text: str) -> str:
    """Drop words that carry no item information."""
    return " ".join(word for word in text.split() if word not in FILLER_WORDS)


def parse_segment(text: str) -> Optional[ParsedItem]:
    """
    Parse a single clause into an item intent.

    Returns:
        ParsedItem, or None when nothing but filler is left
    """
    quantity, remaining = extract_quantity(text)
    raw_name = strip_filler_words(remaining)
    if not raw_name:
        return None
    return ParsedItem(raw_name=raw_name, quantity=quantity)


def parse_natural_language(text: str) -> List[ParsedItem]:
    """Parse a chat line into item intents, in the order they were mentioned."""
    results = []
    for segment in iter_segments(text):
        parsed = parse_segment(segment)
        if parsed:
            results.append(parsed)
    return results
