"""Mention classification and text stripping.

Mentions are located by their literal on-the-wire text (``<at>Name</at>``)
rather than by offset: Bot Framework mention entities carry no offsets, and
earlier replacements in the same pass would shift them anyway.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from enum import StrEnum
from typing import NamedTuple

from .entities import MentionRecord

_AT_TAG_RE = re.compile(r"<at>(.*?)</at>", re.DOTALL)


class RemoveBehavior(StrEnum):
    FULL = "full"
    TAGS = "tags"
    NONE = "none"

    @classmethod
    def parse(cls, value: RemoveBehavior | str) -> RemoveBehavior:
        """Coerce *value* (case-insensitive) into a member or raise ``ValueError``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Invalid mention remove behavior {value!r} (expected one of: {valid})"
            ) from None


class ClassifiedMentions(NamedTuple):
    bot: list[MentionRecord]
    other: list[MentionRecord]


def classify_mentions(
    mentions: Iterable[MentionRecord], bot_id: str | None
) -> ClassifiedMentions:
    """Split *mentions* into those targeting *bot_id* and everything else.

    Order inside each partition follows the input. Without a bot id nothing
    can target the bot, so every mention is classed as "other".
    """
    bot: list[MentionRecord] = []
    other: list[MentionRecord] = []
    for mention in mentions:
        if bot_id is not None and mention.target_id == bot_id:
            bot.append(mention)
        else:
            other.append(mention)
    return ClassifiedMentions(bot, other)


def get_at_tag_content(text: str) -> str:
    """Return the text inside the first ``<at>...</at>`` pair, or ``""``.

    ``"<at>My Bot</at>"`` gives ``"My Bot"``.
    """
    m = _AT_TAG_RE.search(text)
    return m.group(1) if m else ""


def strip_mentions(
    text: str,
    mentions: Sequence[MentionRecord],
    behavior: RemoveBehavior | str,
) -> str:
    """Strip *mentions* out of *text* according to *behavior*.

    Each mention record replaces the first remaining occurrence of its
    literal text, so the same participant mentioned twice needs two records.
    """
    behavior = RemoveBehavior.parse(behavior)
    if behavior is RemoveBehavior.NONE:
        return text

    result = text
    for mention in mentions:
        if not mention.text:
            continue
        replacement = get_at_tag_content(mention.text) if behavior is RemoveBehavior.TAGS else ""
        result = result.replace(mention.text, replacement, 1)
    return result
