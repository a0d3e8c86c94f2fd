"""Chat platform models that can be mentioned.

Only the fields needed to identify and describe each object are kept. Every
model mentions exactly like the id it carries.
"""

from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import MentionConfig, check_emoji_name
from .ids import ChannelId, EmojiId, GuildId, MemberId, RoleId, UserId
from .mention import mention_emoji

__all__ = (
    "CategoryChannel",
    "Channel",
    "CurrentUser",
    "Emoji",
    "Group",
    "GuildChannel",
    "Member",
    "PrivateChannel",
    "Role",
    "TextChannel",
    "User",
    "VoiceChannel",
)


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True)


class User(_Model):
    id: UserId
    name: str = ""

    def mention(self, config: Optional[MentionConfig] = None) -> str:
        return self.id.mention(config)


class CurrentUser(User):
    """The user the client is logged in as."""

    verified: bool = False


class Member(_Model):
    """A user's membership of a guild."""

    guild_id: GuildId
    user: User
    nick: Optional[str] = Field(None, description="Guild specific nickname, if one is set")

    @property
    def member_id(self) -> MemberId:
        return MemberId(guild_id=self.guild_id, user_id=self.user.id)

    def mention(self, config: Optional[MentionConfig] = None) -> str:
        return self.member_id.mention(config)


class Role(_Model):
    id: RoleId
    name: str = ""

    def mention(self, config: Optional[MentionConfig] = None) -> str:
        return self.id.mention(config)


class Emoji(_Model):
    id: EmojiId
    name: Optional[str] = Field(None, description="Emoji name. If missing, the configured placeholder name is used in mentions")
    animated: bool = False

    @field_validator("name")
    def validate_name(cls, v):
        if v is None:
            return v
        return check_emoji_name(v)

    def mention(self, config: Optional[MentionConfig] = None) -> str:
        return mention_emoji(self.id, self.name, self.animated, config=config)


class _GuildChannel(_Model):
    id: ChannelId
    guild_id: Optional[GuildId] = None
    name: str = ""

    def mention(self, config: Optional[MentionConfig] = None) -> str:
        return self.id.mention(config)


class TextChannel(_GuildChannel):
    topic: Optional[str] = None


class VoiceChannel(_GuildChannel):
    bitrate: int = 64000


class CategoryChannel(_GuildChannel):
    pass


class PrivateChannel(_Model):
    """A direct message channel."""

    id: ChannelId
    recipients: Tuple[User, ...] = ()

    def mention(self, config: Optional[MentionConfig] = None) -> str:
        return self.id.mention(config)


class Group(PrivateChannel):
    """A group direct message channel."""

    name: Optional[str] = None
    owner_id: Optional[UserId] = None


GuildChannel = Union[TextChannel, VoiceChannel, CategoryChannel]
Channel = Union[TextChannel, VoiceChannel, CategoryChannel, PrivateChannel, Group]
