"""Feature tests for MentionFormat rendering.

Tests focus on the exact mention syntax per kind, equality of wrappers and
use inside f-strings.
"""

import pytest

from mentionkit import ChannelId, EmojiId, MentionFormat, MentionKind, RoleId, UserId, mention

SAMPLE_VALUES = [0, 1, 7, 123, 10**9, 81384788765712384, 2**63, 2**64 - 1]


class TestRenderingRules:
    """Each kind renders with its own template."""

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_channel(self, value):
        assert str(mention(ChannelId(value))) == f"<#{value}>"

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_emoji(self, value):
        assert str(mention(EmojiId(value))) == f"<:emoji:{value}>"

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_role(self, value):
        assert str(mention(RoleId(value))) == f"<@&{value}>"

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_user(self, value):
        assert str(mention(UserId(value))) == f"<@{value}>"


class TestConcreteScenarios:
    """The reference examples for ID 123."""

    def test_mention_format_channel_id(self):
        assert str(mention(ChannelId(123))) == "<#123>"

    def test_mention_format_emoji_id(self):
        assert str(mention(EmojiId(123))) == "<:emoji:123>"

    def test_mention_format_role_id(self):
        assert str(mention(RoleId(123))) == "<@&123>"

    def test_mention_format_user_id(self):
        """Users render as <@ID>, never <&ID>."""
        assert str(mention(UserId(123))) == "<@123>"


class TestMentionFormatValue:
    """Tests for the wrapper as a value."""

    def test_exposes_id_and_kind(self):
        """The wrapper keeps its identifier and reports its kind."""
        wrapped = mention(RoleId(9))
        assert wrapped.id == RoleId(9)
        assert wrapped.kind is MentionKind.ROLE

    def test_equal_for_same_kind_and_value(self):
        """Wrappers compare structurally."""
        assert mention(UserId(1)) == mention(UserId(1))
        assert hash(mention(UserId(1))) == hash(mention(UserId(1)))

    def test_not_equal_across_kinds(self):
        """Same number, different kind, different mention."""
        assert mention(UserId(1)) != mention(ChannelId(1))

    def test_rendering_is_stable(self):
        """Rendering the same wrapper twice gives the same text."""
        wrapped = mention(EmojiId(77))
        assert str(wrapped) == str(wrapped)

    def test_identifier_mention_method(self):
        """Identifiers expose mention() directly."""
        assert UserId(123).mention() == MentionFormat(UserId(123))


class TestMentionFormatInStrings:
    """Tests for embedding mentions in message text."""

    def test_fstring(self):
        """f-strings render the mention."""
        assert f"Hey there, {mention(UserId(123))}!" == "Hey there, <@123>!"

    def test_str_format(self):
        """str.format renders the mention."""
        assert "See {}".format(mention(ChannelId(5))) == "See <#5>"

    def test_format_spec_applies_to_text(self):
        """A format spec pads the rendered mention like a string."""
        assert f"{mention(RoleId(1)):>8}" == "   <@&1>"
