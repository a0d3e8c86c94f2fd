"""Identifier value types.

Ids are frozen wrappers around a single integer. They are never range
checked, so any integer the platform hands out (or any integer at all) can be
wrapped and mentioned. Ids of different kinds never compare equal, even when
they wrap the same number.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, RootModel

from .config import MentionConfig
from .mention import mention_channel, mention_emoji, mention_member, mention_role, mention_user

__all__ = ("ChannelId", "EmojiId", "GuildId", "MemberId", "RoleId", "Snowflake", "UserId")


class Snowflake(RootModel[int]):
    """Base class for the integer ids of the chat platform."""

    model_config = ConfigDict(frozen=True)

    def __int__(self) -> int:
        return self.root

    def __str__(self) -> str:
        return str(self.root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.root})"


class UserId(Snowflake):
    def mention(self, config: Optional[MentionConfig] = None) -> str:
        """Mention a user id. This will format as `<@ID>`."""
        return mention_user(self)


class RoleId(Snowflake):
    def mention(self, config: Optional[MentionConfig] = None) -> str:
        """Mention a role id. This will format as `<@&ID>`."""
        return mention_role(self)


class ChannelId(Snowflake):
    def mention(self, config: Optional[MentionConfig] = None) -> str:
        """Mention a channel id. This will format as `<#ID>`."""
        return mention_channel(self)


class EmojiId(Snowflake):
    def mention(self, config: Optional[MentionConfig] = None) -> str:
        """Mention an emoji id. This will format as `<:emoji:ID>`."""
        return mention_emoji(self, config=config)


class GuildId(Snowflake):
    pass


class MemberId(BaseModel):
    """A user within a specific guild."""

    model_config = ConfigDict(frozen=True)

    guild_id: GuildId
    user_id: UserId

    def mention(self, config: Optional[MentionConfig] = None) -> str:
        """Mention a member's user. This will format as `<@USER_ID>`."""
        return mention_member(self)
