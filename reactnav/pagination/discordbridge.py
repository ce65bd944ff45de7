#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Reactnav is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# Reactnav is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with Reactnav.  If not, see <https://www.gnu.org/licenses/>.


"""
Binds the paginator to a running Discord.py bot.
"""

__all__ = ("DiscordPlatform",)

import os
import typing

import discord
from discord.ext import commands

from .. import errors
from .. import logging_utils
from .abc import ChatPlatform
from .abc import ReactionAdded
from .abc import ReactionListener

REACTION_ADD_EVENT = "on_raw_reaction_add"

PLATFORM_LOGGER_LEVEL = os.getenv("REACTNAV_PLATFORM_LOGGER_LEVEL", "INFO")


@logging_utils.force_verbosity(PLATFORM_LOGGER_LEVEL)
class DiscordPlatform(ChatPlatform, logging_utils.Loggable):
    """
    :class:`ChatPlatform` on top of ``discord.ext.commands.Bot``.

    Raw reaction events are used so that reactions on messages that fell out
    of the message cache are still seen. Each paginator gets its own bot
    listener, so Discord.py schedules events for separate paginators
    independently of each other.
    """

    def __init__(self, bot: commands.Bot):
        self.bot = bot
        self._listeners: typing.Dict[ReactionListener, typing.Callable] = {}

    async def _channel(self, channel_id: int) -> discord.abc.Messageable:
        channel = self.bot.get_channel(channel_id)
        if channel is None:
            channel = await self.bot.fetch_channel(channel_id)
        return channel

    async def _message(self, channel_id: int, message_id: int) -> discord.PartialMessage:
        channel = await self._channel(channel_id)
        return channel.get_partial_message(message_id)

    async def send_message(self, channel_id, page):
        try:
            channel = await self._channel(channel_id)
            message = await channel.send(embed=page)
        except discord.DiscordException as ex:
            raise errors.PlatformFailure("send_message", ex) from ex
        return message.id

    async def edit_message(self, channel_id, message_id, page):
        try:
            message = await self._message(channel_id, message_id)
            await message.edit(embed=page)
        except discord.DiscordException as ex:
            raise errors.PlatformFailure("edit_message", ex) from ex

    async def add_reaction(self, channel_id, message_id, emoji):
        try:
            message = await self._message(channel_id, message_id)
            await message.add_reaction(emoji)
        except discord.DiscordException as ex:
            raise errors.PlatformFailure("add_reaction", ex) from ex

    async def remove_reaction(self, channel_id, message_id, emoji, user_id):
        try:
            message = await self._message(channel_id, message_id)
            await message.remove_reaction(emoji, discord.Object(id=user_id))
        except discord.DiscordException as ex:
            raise errors.PlatformFailure("remove_reaction", ex) from ex

    async def remove_all_reactions(self, channel_id, message_id):
        try:
            message = await self._message(channel_id, message_id)
            await message.clear_reactions()
        except discord.DiscordException as ex:
            raise errors.PlatformFailure("remove_all_reactions", ex) from ex

    def add_reaction_listener(self, listener):
        if listener in self._listeners:
            return

        async def on_raw_reaction_add(payload: discord.RawReactionActionEvent):
            me = self.bot.user
            if me is not None and payload.user_id == me.id:
                return

            event = ReactionAdded(
                channel_id=payload.channel_id,
                message_id=payload.message_id,
                user_id=payload.user_id,
                emoji=str(payload.emoji),
            )
            await listener(event)

        self._listeners[listener] = on_raw_reaction_add
        self.bot.add_listener(on_raw_reaction_add, REACTION_ADD_EVENT)
        self.logger.debug("Registered reaction listener %r", listener)

    def remove_reaction_listener(self, listener):
        wrapper = self._listeners.pop(listener, None)
        if wrapper is not None:
            self.bot.remove_listener(wrapper, REACTION_ADD_EVENT)
            self.logger.debug("Removed reaction listener %r", listener)
