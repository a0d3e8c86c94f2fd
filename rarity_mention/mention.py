"""Mention utilities for Discord-style message markup.

This module turns identifiers into the text the chat client renders as a
highlighted, clickable reference. Nothing here checks that the referenced
user, role, channel or emoji exists; the functions only project an id into
its mention syntax.
"""

from typing import TYPE_CHECKING, Iterable, Optional, Protocol, Union, runtime_checkable

from .config import DEFAULT_CONFIG, MentionConfig, is_valid_emoji_name

if TYPE_CHECKING:
    from .ids import ChannelId, EmojiId, GuildId, MemberId, RoleId, UserId

__all__ = (
    "Mentionable",
    "mention",
    "mention_all",
    "mention_channel",
    "mention_emoji",
    "mention_member",
    "mention_role",
    "mention_user",
)


@runtime_checkable
class Mentionable(Protocol):
    """Anything that can render itself as a mention."""

    def mention(self, config: Optional[MentionConfig] = None) -> str: ...


def mention_user(user_id: Union["UserId", int]) -> str:
    """Create a mention for a user.

    Args:
        user_id: The user's id.

    Returns:
        The mention, formatted as `<@ID>`.

    Example:
        >>> mention_user(123)
        '<@123>'
    """
    return f"<@{int(user_id)}>"


def mention_role(role_id: Union["RoleId", int]) -> str:
    """Create a mention for a role, formatted as `<@&ID>`.

    Example:
        >>> mention_role(456)
        '<@&456>'
    """
    return f"<@&{int(role_id)}>"


def mention_channel(channel_id: Union["ChannelId", int]) -> str:
    """Create a mention for a channel, formatted as `<#ID>`.

    Example:
        >>> mention_channel(789)
        '<#789>'
    """
    return f"<#{int(channel_id)}>"


def mention_emoji(
    emoji_id: Union["EmojiId", int],
    name: Optional[str] = None,
    animated: bool = False,
    config: Optional[MentionConfig] = None,
) -> str:
    """Create a mention for a custom emoji.

    Args:
        emoji_id: The emoji's id.
        name: The emoji's name. The client resolves the emoji by id, so when
            the name is missing, or would break the mention syntax, the
            placeholder from ``config.emoji_name`` is used instead.
        animated: Whether the emoji is animated, which adds the `a` prefix.
        config: Formatting defaults, `DEFAULT_CONFIG` if not given.

    Returns:
        The mention, formatted as `<:NAME:ID>` or `<a:NAME:ID>`.

    Examples:
        >>> mention_emoji(123)
        '<:emoji:123>'
        >>> mention_emoji(123, "blob", animated=True)
        '<a:blob:123>'
        >>> mention_emoji(123, "two words")
        '<:emoji:123>'
    """
    if not name or not is_valid_emoji_name(name):
        name = (config or DEFAULT_CONFIG).emoji_name
    prefix = "a" if animated else ""
    return f"<{prefix}:{name}:{int(emoji_id)}>"


def mention_member(
    member_id: Union["MemberId", "GuildId", int],
    user_id: Union["UserId", int, None] = None,
) -> str:
    """Create a mention for a guild member.

    Accepts either a `MemberId` or a guild id and user id pair. A member is
    mentioned through its user, so the guild does not change the output.

    Raises:
        TypeError: If only a guild id is given.

    Examples:
        >>> mention_member(1, 123)
        '<@123>'
    """
    if user_id is None:
        user_id = getattr(member_id, "user_id", None)
        if user_id is None:
            raise TypeError(f"Cannot mention a member from a {type(member_id).__name__} without a user_id")
    return mention_user(user_id)


def mention(entity: Mentionable, config: Optional[MentionConfig] = None) -> str:
    """Mention any id or model that supports it.

    ``config`` is handed on to the entity's ``mention()`` when given.

    Raises:
        TypeError: If ``entity`` has no ``mention()`` method.
    """
    if not isinstance(entity, Mentionable):
        raise TypeError(f"Cannot mention a value of type {type(entity).__name__}")
    if config is None:
        return entity.mention()
    return entity.mention(config)


def mention_all(
    entities: Iterable[Mentionable],
    separator: Optional[str] = None,
    config: Optional[MentionConfig] = None,
) -> str:
    """Mention several ids or models at once.

    Args:
        entities: Values to mention, in order.
        separator: String to use between mentions, ``config.separator`` if not given.
        config: Formatting defaults, `DEFAULT_CONFIG` if not given.

    Example:
        >>> from rarity_mention import RoleId, UserId
        >>> mention_all([UserId(123), RoleId(456)])
        '<@123> <@&456>'
    """
    if separator is None:
        separator = (config or DEFAULT_CONFIG).separator
    return separator.join(mention(entity, config) for entity in entities)
