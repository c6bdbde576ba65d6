"""Strip @mentions from Bot Framework message activities."""

from .messaging import (
    OutputMode,
    RemoveBehavior,
    StripMentions,
    StripMentionsOptions,
    get_original_text,
    get_stripped_text,
    strip_mentions,
)

__all__ = [
    "OutputMode",
    "RemoveBehavior",
    "StripMentions",
    "StripMentionsOptions",
    "get_original_text",
    "get_stripped_text",
    "strip_mentions",
]
