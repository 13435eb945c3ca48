"""
Prompts for emoji message interpretation.

The system prompt sets the analyst role and scoring rubric; the user prompt
embeds the message, platform and relationship context plus the emojis we
already found, and spells out the exact JSON shape we will validate.
"""

from app.services.interpreter.types import (
    ExtractedEmoji,
    InterpretationInput,
    Platform,
    RelationshipContext,
)

INTERPRETATION_SYSTEM_PROMPT = """You are an expert emoji interpreter specializing in understanding the nuanced, contextual meanings of emojis in modern digital communication.

Your task is to analyze messages containing emojis and provide accurate interpretations based on:

1. LITERAL VS CONTEXTUAL MEANING: Consider both the Unicode definition and how the emoji is actually used in real-world communication.

2. PLATFORM CONVENTIONS: Different platforms (iMessage, Instagram, TikTok, Slack, Discord, Twitter, WhatsApp) have different emoji cultures and norms.

3. RELATIONSHIP CONTEXT: The meaning changes based on whether the message is from a romantic partner, friend, family member, coworker, acquaintance, or stranger.

4. TONE ANALYSIS:
   - sarcasmProbability (0-100): how likely the message is sarcastic
   - passiveAggressionProbability (0-100): how likely the intent is passive-aggressive
   - overallTone: "positive", "neutral" or "negative"
   - confidence (0-100): how sure you are of this reading

5. RED FLAGS: Identify concerning patterns such as manipulation, guilt-tripping, gaslighting, boundary violations, love bombing or mixed signals. Rate each "low", "medium" or "high".

Be honest and direct. If a message seems concerning, say so clearly.

OUTPUT: Respond with ONLY a JSON object. No prose before or after it."""

PLATFORM_LABELS: dict[Platform, str] = {
    Platform.IMESSAGE: "Apple iMessage",
    Platform.INSTAGRAM: "Instagram DMs",
    Platform.TIKTOK: "TikTok comments/messages",
    Platform.WHATSAPP: "WhatsApp",
    Platform.SLACK: "Slack workplace messaging",
    Platform.DISCORD: "Discord",
    Platform.TWITTER: "Twitter/X DMs",
    Platform.OTHER: "Other platform",
}

CONTEXT_LABELS: dict[RelationshipContext, str] = {
    RelationshipContext.ROMANTIC_PARTNER: "Someone you are dating or in a relationship with",
    RelationshipContext.FRIEND: "A friend or close acquaintance",
    RelationshipContext.FAMILY: "A family member",
    RelationshipContext.COWORKER: "A colleague or professional contact",
    RelationshipContext.ACQUAINTANCE: "Someone you know casually",
    RelationshipContext.STRANGER: "Someone you do not know personally",
}


def build_interpretation_prompt(
    request: InterpretationInput,
    extracted: list[ExtractedEmoji],
) -> str:
    """Build the user prompt for one interpretation request."""
    platform = request.platform
    context = request.context

    lines = [
        "Analyze the following message and provide your interpretation in JSON format.",
        "",
        f'MESSAGE: "{request.message}"',
        "",
        f"PLATFORM: {platform.value} ({PLATFORM_LABELS[platform]})",
        f"RELATIONSHIP CONTEXT: {context.value} - {CONTEXT_LABELS[context]}",
        "",
    ]

    if extracted:
        lines.append("EMOJIS FOUND (in order of appearance):")
        for emoji in extracted:
            lines.append(f"- {emoji.character} at position {emoji.index}")
        lines.append("")

    lines.extend(
        [
            "Respond with a JSON object with exactly these fields:",
            '- "emojis": array of {"character", "meaning"} for each emoji, in order',
            '- "interpretation": overall interpretation of the message',
            '- "metrics": {"sarcasmProbability", "passiveAggressionProbability", '
            '"overallTone", "confidence"}',
            '- "redFlags": array of {"type", "description", "severity"} (empty array if none)',
        ]
    )

    return "\n".join(lines)
