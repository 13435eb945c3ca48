# Services package

from app.services.interpreter import EmojiCatalog, EmojiInterpreter

__all__ = [
    "EmojiCatalog",
    "EmojiInterpreter",
]
