"""
Emoji extraction with position tracking.

Finds every emoji in a message, keeping composed sequences (ZWJ families,
skin-tone modifiers, flags, keycaps) together as one entry. Offsets are
Python string indices, i.e. code points, so `message[e.index:]` always
starts with `e.character`.
"""

import regex

from app.services.interpreter.types import ExtractedEmoji

# A single pictographic code point, optionally followed by VS16 and/or a
# Fitzpatrick skin-tone modifier (U+1F3FB..U+1F3FF).
_PICTO = (
    r"[\p{Emoji_Presentation}\p{Extended_Pictographic}]"
    r"\uFE0F?[\U0001F3FB-\U0001F3FF]?\uFE0F?"
)

EMOJI_PATTERN = regex.compile(
    # Flags: a pair of regional indicators
    r"[\U0001F1E6-\U0001F1FF]{2}"
    # Subdivision flags: black flag + tag characters + cancel tag
    r"|\U0001F3F4[\U000E0020-\U000E007E]+\U000E007F"
    # Keycaps: 0-9, # or * + optional VS16 + combining enclosing keycap
    r"|[0-9#*]\uFE0F?\u20E3"
    # Everything else, joined by ZWJ into one sequence
    rf"|{_PICTO}(?:\u200D{_PICTO})*"
)


def extract_emojis_with_positions(message: str) -> list[ExtractedEmoji]:
    """
    Extract emojis from a message with their positions.

    Args:
        message: Raw message text

    Returns:
        Emojis in left-to-right order; empty list when the message has none
    """
    return [
        ExtractedEmoji(character=match.group(), index=match.start())
        for match in EMOJI_PATTERN.finditer(message)
    ]


def contains_emoji(message: str) -> bool:
    """Check whether a message contains at least one emoji."""
    return EMOJI_PATTERN.search(message) is not None
