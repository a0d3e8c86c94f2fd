"""Mentions for Discord-style chat models.

This package formats users, roles, channels, emojis and members (or their
ids) into the mention syntax the chat client renders as clickable references,
and provides csp nodes to do the same on streams.
"""

__version__ = "0.1.0"

from .adapter import mention_all_ts, mention_ts
from .config import DEFAULT_CONFIG, MentionConfig
from .ids import ChannelId, EmojiId, GuildId, MemberId, RoleId, Snowflake, UserId
from .mention import (
    Mentionable,
    mention,
    mention_all,
    mention_channel,
    mention_emoji,
    mention_member,
    mention_role,
    mention_user,
)
from .models import (
    CategoryChannel,
    Channel,
    CurrentUser,
    Emoji,
    Group,
    GuildChannel,
    Member,
    PrivateChannel,
    Role,
    TextChannel,
    User,
    VoiceChannel,
)

__all__ = [
    # Ids
    "Snowflake",
    "UserId",
    "RoleId",
    "ChannelId",
    "EmojiId",
    "GuildId",
    "MemberId",
    # Models
    "User",
    "CurrentUser",
    "Member",
    "Role",
    "Emoji",
    "TextChannel",
    "VoiceChannel",
    "CategoryChannel",
    "PrivateChannel",
    "Group",
    "GuildChannel",
    "Channel",
    # Config
    "MentionConfig",
    "DEFAULT_CONFIG",
    # Mentions
    "Mentionable",
    "mention",
    "mention_all",
    "mention_user",
    "mention_role",
    "mention_channel",
    "mention_emoji",
    "mention_member",
    # csp
    "mention_ts",
    "mention_all_ts",
]
