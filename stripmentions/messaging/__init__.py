"""Mention stripping -- classifier, text stripper, and Bot Framework middleware."""

from .entities import (
    MentionRecord,
    StrippedText,
    get_mentions,
    get_stripped_text,
    mention_from_entity,
)
from .mentions import (
    ClassifiedMentions,
    RemoveBehavior,
    classify_mentions,
    get_at_tag_content,
    strip_mentions,
)
from .middleware import (
    ORIGINAL_TEXT_KEY,
    OutputMode,
    StripMentions,
    StripMentionsOptions,
    get_original_text,
)

__all__ = [
    "ClassifiedMentions",
    "MentionRecord",
    "ORIGINAL_TEXT_KEY",
    "OutputMode",
    "RemoveBehavior",
    "StripMentions",
    "StripMentionsOptions",
    "StrippedText",
    "classify_mentions",
    "get_at_tag_content",
    "get_mentions",
    "get_original_text",
    "get_stripped_text",
    "mention_from_entity",
    "strip_mentions",
]
