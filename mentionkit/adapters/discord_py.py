"""discord.py support for :func:`mentionkit.mention`.

Importing this module registers discord.py's channel, user, member, role and
emoji classes, so ``mention(ctx.author)`` or ``mention(message.channel)``
work directly. :mod:`mentionkit` imports it on package import.
"""

import logging
from typing import Union

import discord

from mentionkit.domain import ChannelId, EmojiId, RoleId, UserId
from mentionkit.dispatch import register_mentionable

logger = logging.getLogger(__name__)

CHANNEL_TYPES = (
    discord.TextChannel,
    discord.VoiceChannel,
    discord.CategoryChannel,
    discord.DMChannel,
    discord.GroupChannel,
    discord.StageChannel,
    discord.ForumChannel,
    discord.Thread,
)
# discord.Member.id proxies the wrapped user's ID
USER_TYPES = (discord.User, discord.ClientUser, discord.Member)


def _channel_id(
    channel: Union[discord.abc.GuildChannel, discord.abc.PrivateChannel, discord.Thread],
) -> ChannelId:
    return ChannelId(channel.id)


def _user_id(user: discord.abc.User) -> UserId:
    return UserId(user.id)


def _role_id(role: discord.Role) -> RoleId:
    return RoleId(role.id)


def _emoji_id(emoji: discord.Emoji) -> EmojiId:
    return EmojiId(emoji.id)


def register_discord_types() -> None:
    """Register discord.py models with :func:`mentionkit.mention`. Safe to call repeatedly."""
    for channel_type in CHANNEL_TYPES:
        register_mentionable(channel_type, _channel_id)
    for user_type in USER_TYPES:
        register_mentionable(user_type, _user_id)
    register_mentionable(discord.Role, _role_id)
    register_mentionable(discord.Emoji, _emoji_id)
    logger.debug(
        "Registered %d discord.py types for mentions",
        len(CHANNEL_TYPES) + len(USER_TYPES) + 2,
    )


register_discord_types()
