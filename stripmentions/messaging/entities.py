"""Reading mention entities from, and attaching derived text to, activities."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from botbuilder.schema import Activity, Entity

logger = logging.getLogger(__name__)

MENTION_ENTITY = "mention"
STRIPPED_TEXT_ENTITY = "strippedText"


@dataclass(frozen=True, slots=True)
class MentionRecord:
    """A mention as seen by the stripper: literal text plus its target."""

    text: str
    target_id: str | None = None
    target_name: str | None = None


class StrippedText(Entity):
    """Entity carrying the message text with mentions stripped."""

    _attribute_map = {
        "type": {"key": "type", "type": "str"},
        "text": {"key": "text", "type": "str"},
    }

    def __init__(self, *, text: str = None, **kwargs) -> None:
        super().__init__(type=STRIPPED_TEXT_ENTITY, **kwargs)
        self.text = text


def _field(obj: Any, name: str) -> Any:
    # Typed schema objects expose attributes; deserialized ones keep extras in a dict.
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    value = getattr(obj, name, None)
    if value is None:
        value = (getattr(obj, "additional_properties", None) or {}).get(name)
    return value


def mention_from_entity(entity: Any) -> MentionRecord | None:
    """Build a :class:`MentionRecord` from a ``mention`` entity, else ``None``."""
    if (_field(entity, "type") or "").lower() != MENTION_ENTITY:
        return None
    text = _field(entity, "text")
    if not text:
        logger.debug("[mentions] Skipping mention entity without text")
        return None
    mentioned = _field(entity, "mentioned")
    return MentionRecord(
        text=text,
        target_id=_field(mentioned, "id"),
        target_name=_field(mentioned, "name"),
    )


def get_mentions(activity: Activity) -> list[MentionRecord]:
    """Return the activity's mentions in extraction order."""
    return [
        record
        for entity in activity.entities or []
        if (record := mention_from_entity(entity)) is not None
    ]


def get_stripped_text(activity: Activity) -> str | None:
    """Return the text of the most recent ``strippedText`` entity, if any."""
    for entity in reversed(activity.entities or []):
        if _field(entity, "type") == STRIPPED_TEXT_ENTITY:
            return _field(entity, "text")
    return None
