"""
Tests for emoji extraction.

Tests cover:
- Single and multiple emojis with positions
- Composed sequences (ZWJ families, skin tones, flags, keycaps, VS16)
- Messages without emojis
- Offsets are Python string indices
"""

from app.services.interpreter import ExtractedEmoji, contains_emoji, extract_emojis_with_positions

FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"
THUMBS_UP_MEDIUM = "\U0001F44D\U0001F3FD"
FLAG_US = "\U0001F1FA\U0001F1F8"
FLAG_FR = "\U0001F1EB\U0001F1F7"
RED_HEART = "❤\ufe0f"
KEYCAP_ONE = "1\ufe0f\u20e3"
FLAG_ENGLAND = "\U0001F3F4\U000E0067\U000E0062\U000E0065\U000E006E\U000E0067\U000E007F"
WOMAN_TECHNOLOGIST_DARK = "\U0001F469\U0001F3FF\u200d\U0001F4BB"


class TestExtractBasics:
    """Single emojis, ordering and empty input."""

    def test_single_emoji_with_index(self) -> None:
        """'Hello 😀' yields one emoji at index 6."""
        assert extract_emojis_with_positions("Hello 😀") == [
            ExtractedEmoji(character="😀", index=6)
        ]

    def test_multiple_emojis_in_order(self) -> None:
        """Emojis come back left to right with strictly increasing indices."""
        result = extract_emojis_with_positions("Hello 👋 there 😊")

        assert [e.character for e in result] == ["👋", "😊"]
        assert result[0].index < result[1].index
        assert result[0].index == 6

    def test_no_emojis(self) -> None:
        """Plain text returns an empty list."""
        assert extract_emojis_with_positions("Hello there") == []

    def test_empty_string(self) -> None:
        assert extract_emojis_with_positions("") == []

    def test_adjacent_emojis_are_separate(self) -> None:
        """Two emojis with nothing between them are two entries."""
        result = extract_emojis_with_positions("💀💀")

        assert [e.character for e in result] == ["💀", "💀"]
        assert [e.index for e in result] == [0, 1]

    def test_plain_digits_and_symbols_ignored(self) -> None:
        """Digits, # and * are only emoji as part of a keycap."""
        assert extract_emojis_with_positions("Call me at 555-1234 #blessed *wink*") == []

    def test_index_points_at_character(self) -> None:
        """Every index slices back to its own emoji in the source message."""
        message = f"ok {FAMILY} then {THUMBS_UP_MEDIUM} and {FLAG_US}!"

        for emoji in extract_emojis_with_positions(message):
            assert message[emoji.index : emoji.index + len(emoji.character)] == emoji.character


class TestComposedSequences:
    """Multi-code-point emojis stay together."""

    def test_zwj_family_is_one_emoji(self) -> None:
        """A 4-person ZWJ family is a single entry, not four."""
        result = extract_emojis_with_positions(f"My fam {FAMILY} rocks")

        assert len(result) == 1
        assert result[0].character == FAMILY
        assert result[0].index == 7

    def test_skin_tone_modifier_attached(self) -> None:
        result = extract_emojis_with_positions(f"nice {THUMBS_UP_MEDIUM}")

        assert result == [ExtractedEmoji(character=THUMBS_UP_MEDIUM, index=5)]

    def test_zwj_with_skin_tone(self) -> None:
        result = extract_emojis_with_positions(WOMAN_TECHNOLOGIST_DARK)

        assert [e.character for e in result] == [WOMAN_TECHNOLOGIST_DARK]

    def test_flag_pair(self) -> None:
        result = extract_emojis_with_positions(f"Go {FLAG_US}")

        assert [e.character for e in result] == [FLAG_US]

    def test_consecutive_flags_split_into_pairs(self) -> None:
        result = extract_emojis_with_positions(FLAG_US + FLAG_FR)

        assert [e.character for e in result] == [FLAG_US, FLAG_FR]
        assert [e.index for e in result] == [0, 2]

    def test_subdivision_flag(self) -> None:
        result = extract_emojis_with_positions(f"come on {FLAG_ENGLAND}")

        assert [e.character for e in result] == [FLAG_ENGLAND]

    def test_variation_selector_kept(self) -> None:
        """❤\ufe0f keeps its VS16 so it matches the catalog key."""
        result = extract_emojis_with_positions(f"love you {RED_HEART}")

        assert [e.character for e in result] == [RED_HEART]

    def test_keycap(self) -> None:
        result = extract_emojis_with_positions(f"Step {KEYCAP_ONE} done")

        assert [e.character for e in result] == [KEYCAP_ONE]

    def test_dangling_zwj_does_not_raise(self) -> None:
        """A ZWJ with nothing after it is ignored, never an error."""
        result = extract_emojis_with_positions("😀\u200d end")

        assert [e.character for e in result] == ["😀"]


class TestContainsEmoji:
    def test_true_when_emoji_present(self) -> None:
        assert contains_emoji("sure thing 🙂")

    def test_false_for_plain_text(self) -> None:
        assert not contains_emoji("sure thing")
