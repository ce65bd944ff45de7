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
Holds the bot implementation.
"""
import discord
from discord.ext import commands

from reactnav import logging_utils
from reactnav import pagination
from reactnav.settings import Settings

__all__ = ("BotInterrupt", "Bot", "EXTENSIONS")

# Sue me.
BotInterrupt = KeyboardInterrupt

MAX_MESSAGES = 300

EXTENSIONS = ("reactnav.features.pages",)


class Bot(commands.Bot, logging_utils.Loggable):
    """
    Discord.py bot that hosts paginators.

    :param settings: loaded settings. Defaults are used if omitted.
    """

    def __init__(self, settings: Settings = None, **kwargs):
        self.settings = settings if settings is not None else Settings()

        intents = discord.Intents.default()
        intents.message_content = True
        intents.reactions = True

        kwargs.setdefault("command_prefix", commands.when_mentioned_or(self.settings.command_prefix))
        kwargs.setdefault("intents", intents)
        super().__init__(max_messages=MAX_MESSAGES, **kwargs)

        self.platform = pagination.DiscordPlatform(self)
        self.logger.info(f"Using command prefix: {self.settings.command_prefix}")

    def new_paginator(self, channel_id: int, user_id: int) -> pagination.Paginator:
        """Makes a paginator using the configured control emojis and timeout."""
        return pagination.Paginator(
            self.platform,
            channel_id,
            user_id,
            self.settings.control_emojis,
            timeout=self.settings.timeout,
        )

    async def setup_hook(self):
        for extension in EXTENSIONS:
            self.logger.debug(f"Loading extension {extension!r}")
            await self.load_extension(extension)

    async def on_ready(self):
        self.logger.info("Logged in as %s (%s)", self.user, getattr(self.user, "id", None))

    async def on_command(self, ctx):
        if ctx.guild:
            self.logger.debug(
                "A user invoked %s in %s#%s (%s#%s) (message ID: %s)",
                ctx.message.content.replace("@", "@-"),
                ctx.guild,
                ctx.channel,
                ctx.guild.id,
                ctx.channel.id,
                ctx.message.id,
            )
        else:
            self.logger.debug(
                "A user invoked %s in private messages (message ID: %s)",
                ctx.message.content.replace("@", "@-"),
                ctx.message.id,
            )
