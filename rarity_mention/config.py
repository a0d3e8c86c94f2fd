from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ("DEFAULT_CONFIG", "MentionConfig", "check_emoji_name", "is_valid_emoji_name")

_RESERVED_EMOJI_CHARACTERS = ":<>"


def is_valid_emoji_name(name: str) -> bool:
    """Whether ``name`` can sit between the delimiters of an emoji mention without changing its syntax."""
    return bool(name) and not any(c in _RESERVED_EMOJI_CHARACTERS or c.isspace() for c in name)


def check_emoji_name(name: str) -> str:
    """Return ``name`` unchanged, or raise ValueError if it is not a valid emoji name."""
    if not is_valid_emoji_name(name):
        raise ValueError(f"emoji name must be non-empty and may not contain whitespace or any of {_RESERVED_EMOJI_CHARACTERS!r}, got {name!r}")
    return name


class MentionConfig(BaseModel):
    """Formatting defaults for mentions that have more than one valid rendering."""

    model_config = ConfigDict(frozen=True)

    emoji_name: str = Field("emoji", description="Placeholder name used when an emoji is mentioned by id alone, like `<:emoji:123>`")
    separator: str = Field(" ", description="String placed between mentions when several are formatted together")

    @field_validator("emoji_name")
    def validate_emoji_name(cls, v):
        return check_emoji_name(v)


DEFAULT_CONFIG = MentionConfig()
