"""Input/output types for emoji message interpretation.

Everything here is created fresh for a single interpretation call and
discarded afterwards; nothing is shared between requests except the
read-only catalog.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from app.services.interpreter.schema import InterpretationMetrics, RedFlag


class Platform(str, Enum):
    """Messaging platform the message was sent on."""

    IMESSAGE = "IMESSAGE"
    INSTAGRAM = "INSTAGRAM"
    TIKTOK = "TIKTOK"
    WHATSAPP = "WHATSAPP"
    SLACK = "SLACK"
    DISCORD = "DISCORD"
    TWITTER = "TWITTER"
    OTHER = "OTHER"


class RelationshipContext(str, Enum):
    """Relationship between the sender and the reader."""

    ROMANTIC_PARTNER = "ROMANTIC_PARTNER"
    FRIEND = "FRIEND"
    FAMILY = "FAMILY"
    COWORKER = "COWORKER"
    ACQUAINTANCE = "ACQUAINTANCE"
    STRANGER = "STRANGER"


@dataclass(frozen=True)
class ExtractedEmoji:
    """An emoji found in the message and where it starts."""

    character: str  # May span several code points (ZWJ, modifiers, flags)
    index: int  # Python str index of the first code point


@dataclass
class InterpretationInput:
    """What the caller wants interpreted."""

    message: str
    platform: Platform
    context: RelationshipContext


@dataclass
class DetectedEmoji:
    """An emoji as explained by the model, linked to the catalog when known."""

    character: str
    meaning: str
    slug: str | None = None  # None = not in catalog; omitted from to_dict()

    def to_dict(self) -> dict[str, Any]:
        data = {"character": self.character, "meaning": self.meaning}
        if self.slug is not None:
            data["slug"] = self.slug
        return data


@dataclass
class InterpretationResult:
    """Final, fully validated interpretation returned to callers."""

    id: str  # "int_<unique suffix>"
    timestamp: str  # ISO-8601, UTC
    message: str
    interpretation: str
    metrics: InterpretationMetrics
    emojis: list[DetectedEmoji] = field(default_factory=list)
    red_flags: list[RedFlag] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys the frontend expects."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "message": self.message,
            "emojis": [emoji.to_dict() for emoji in self.emojis],
            "interpretation": self.interpretation,
            "metrics": self.metrics.model_dump(by_alias=True),
            "redFlags": [flag.model_dump(by_alias=True) for flag in self.red_flags],
        }
