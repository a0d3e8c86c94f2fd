import pytest

from rarity_mention import DEFAULT_CONFIG, MentionConfig


class TestMentionConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.emoji_name == "emoji"
        assert DEFAULT_CONFIG.separator == " "

    @pytest.mark.parametrize("emoji_name", ["", "a:b", "<e>", "two words", "tab\t"])
    def test_bad_emoji_name(self, emoji_name):
        with pytest.raises(ValueError, match="emoji_name"):
            MentionConfig(emoji_name=emoji_name)

    def test_custom(self):
        config = MentionConfig(emoji_name="e", separator=", ")
        assert config.emoji_name == "e"
        assert config.separator == ", "
