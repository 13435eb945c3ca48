from app.api.v1 import emojis, interpret

__all__ = [
    "interpret",
    "emojis",
]
