"""Bot Framework middleware that strips @mentions from incoming messages."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from botbuilder.core import Middleware, TurnContext

from .entities import StrippedText, get_mentions
from .mentions import RemoveBehavior, classify_mentions, strip_mentions

if TYPE_CHECKING:
    from ..config.settings import Settings

logger = logging.getLogger(__name__)

ORIGINAL_TEXT_KEY = "StripMentions.originalText"


class OutputMode(StrEnum):
    ENTITY = "entity"
    TEXT = "text"


@dataclass(frozen=True)
class StripMentionsOptions:
    bot_mention_remove_behavior: RemoveBehavior = RemoveBehavior.FULL
    user_mention_remove_behavior: RemoveBehavior = RemoveBehavior.TAGS
    output_mode: OutputMode = OutputMode.ENTITY

    def __post_init__(self) -> None:
        # Accept plain strings; frozen, so go through object.__setattr__.
        object.__setattr__(
            self, "bot_mention_remove_behavior",
            RemoveBehavior.parse(self.bot_mention_remove_behavior),
        )
        object.__setattr__(
            self, "user_mention_remove_behavior",
            RemoveBehavior.parse(self.user_mention_remove_behavior),
        )
        object.__setattr__(self, "output_mode", OutputMode(self.output_mode))

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> StripMentionsOptions:
        if settings is None:
            from ..config.settings import cfg
            settings = cfg
        return cls(
            bot_mention_remove_behavior=settings.bot_mention_remove_behavior,
            user_mention_remove_behavior=settings.user_mention_remove_behavior,
            output_mode=settings.output_mode,
        )


class StripMentions(Middleware):
    """Strip bot and user mentions from each incoming message.

    In ``entity`` mode (the default) the activity text is left alone and a
    ``strippedText`` entity is appended. In ``text`` mode the activity text
    is overwritten and the original is kept in the turn state, readable via
    :func:`get_original_text`.

    Messages without text, or without a known bot account, pass through
    untouched. The rest of the pipeline always runs.
    """

    def __init__(self, options: StripMentionsOptions | None = None) -> None:
        self.options = options or StripMentionsOptions()

    async def on_turn(
        self, context: TurnContext, logic: Callable[[], Awaitable]
    ) -> None:
        self._strip(context)
        await logic()

    def _strip(self, context: TurnContext) -> None:
        activity = context.activity
        bot_id = activity.recipient.id if activity.recipient else None
        if not activity.text or not bot_id:
            logger.debug(
                "[mentions] Passthrough: text=%s bot_id=%s", bool(activity.text), bool(bot_id),
            )
            return

        if activity.entities is None:
            activity.entities = []

        mentions = classify_mentions(get_mentions(activity), bot_id)
        logger.debug(
            "[mentions] bot=%d other=%d", len(mentions.bot), len(mentions.other),
        )

        opts = self.options
        stripped = activity.text
        if opts.bot_mention_remove_behavior is not RemoveBehavior.NONE:
            stripped = strip_mentions(stripped, mentions.bot, opts.bot_mention_remove_behavior)
        if opts.user_mention_remove_behavior is not RemoveBehavior.NONE:
            stripped = strip_mentions(stripped, mentions.other, opts.user_mention_remove_behavior)

        if opts.output_mode is OutputMode.TEXT:
            context.turn_state[ORIGINAL_TEXT_KEY] = activity.text
            activity.text = stripped
        else:
            activity.entities.append(StrippedText(text=stripped))


def get_original_text(context: TurnContext) -> str | None:
    """Return the message text as it was before mentions were stripped."""
    if ORIGINAL_TEXT_KEY in context.turn_state:
        return context.turn_state[ORIGINAL_TEXT_KEY]
    return context.activity.text
