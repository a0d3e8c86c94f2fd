import logging

import csp
from csp import ts

from .config import DEFAULT_CONFIG, MentionConfig
from .mention import Mentionable, mention, mention_all

__all__ = ("mention_all_ts", "mention_ts")

log = logging.getLogger(__name__)


@csp.node
def mention_ts(entity: ts[object], config: MentionConfig = DEFAULT_CONFIG) -> ts[str]:
    """Mention every tick of ``entity``. Ticks that can't be mentioned are logged and dropped, the graph keeps running."""
    if csp.ticked(entity):
        if isinstance(entity, Mentionable):
            return mention(entity, config)
        log.error(f"Cannot mention value of type {type(entity).__name__}: {entity!r}")


@csp.node
def mention_all_ts(entities: ts[[object]], config: MentionConfig = DEFAULT_CONFIG) -> ts[str]:
    """Mention every entity of each tick, joined by ``config.separator``.

    Unmentionable entities are logged and skipped. Every tick produces an output,
    so a tick with nothing to mention gives an empty string, like ``mention_all([])``.
    """
    if csp.ticked(entities):
        mentionable = []
        for entity in entities:
            if isinstance(entity, Mentionable):
                mentionable.append(entity)
            else:
                log.error(f"Cannot mention value of type {type(entity).__name__}: {entity!r}")
        return mention_all(mentionable, config=config)
