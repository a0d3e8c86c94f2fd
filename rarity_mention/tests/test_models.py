import pytest

from rarity_mention import CurrentUser, Emoji, Member, MemberId, MentionConfig, Mentionable, Role, User, UserId, mention


class TestModels:
    def test_user(self, user):
        assert user.mention() == "<@123>"
        assert user.mention() == user.id.mention()

    def test_current_user(self):
        assert CurrentUser(id=42, name="bot", verified=True).mention() == "<@42>"

    def test_member(self, member):
        assert member.mention() == "<@123>"
        assert member.member_id == MemberId(guild_id=1, user_id=123)

    def test_role(self):
        assert Role(id=456, name="moderators").mention() == "<@&456>"

    def test_emoji(self, static_emoji, animated_emoji):
        assert static_emoji.mention() == "<:blob:321>"
        assert animated_emoji.mention() == "<a:blobdance:654>"

    def test_emoji_without_name(self):
        assert Emoji(id=123).mention() == "<:emoji:123>"
        assert Emoji(id=123).mention(MentionConfig(emoji_name="e")) == "<:e:123>"

    @pytest.mark.parametrize("name", ["two words", "a:b>", "<blob", ""])
    def test_emoji_rejects_bad_name(self, name):
        with pytest.raises(ValueError, match="emoji name"):
            Emoji(id=1, name=name)

    def test_config_does_not_change_named_models(self, static_emoji, member):
        config = MentionConfig(emoji_name="e")
        assert static_emoji.mention(config) == "<:blob:321>"
        assert member.mention(config) == "<@123>"

    def test_channel(self, channel, channel_id):
        assert channel.mention() == "<#789>"
        assert channel.mention() == channel_id.mention()

    def test_models_are_mentionable(self, user, member, static_emoji, channel):
        for model in (user, member, static_emoji, channel):
            assert isinstance(model, Mentionable)
            assert mention(model) == model.mention()

    def test_models_are_frozen(self, user):
        with pytest.raises(ValueError):
            user.name = "Someone Else"

    def test_nested_user_coerced(self):
        member = Member(guild_id=1, user={"id": 7, "name": "nested"})
        assert member.user == User(id=UserId(7), name="nested")
        assert member.mention() == "<@7>"
