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
Lets users page through their own text.
"""
import re
import typing

import discord
from discord.ext import commands

from reactnav import cog
from reactnav import errors

PAGE_BREAK = re.compile(r"^[ \t]*---[ \t]*$", re.MULTILINE)


def split_pages(text: str) -> typing.List[str]:
    """Splits on lines consisting only of ``---``, dropping empty pages."""
    return [chunk.strip() for chunk in PAGE_BREAK.split(text) if chunk.strip()]


def build_embeds(chunks: typing.Sequence[str], title: str = None) -> typing.List[discord.Embed]:
    return [discord.Embed(title=title, description=chunk) for chunk in chunks]


class PagesCog(cog.CogBase):
    @commands.command(name="pages", brief="Pages through the given text.")
    async def pages_command(self, ctx: commands.Context, *, text: str):
        """
        Shows your text one page at a time. Put a line containing only
        ``---`` between pages, then use the reactions to move around.
        Only you can turn the pages.
        """
        paginator = self.bot.new_paginator(ctx.channel.id, ctx.author.id)

        try:
            for embed in build_embeds(split_pages(text), title=f"Pages for {ctx.author.display_name}"):
                paginator.add(embed)

            await paginator.run()
        except errors.PaginatorError as ex:
            self.logger.debug("Paginator for %s failed", ctx.author.id, exc_info=ex)
            await ctx.send(str(ex))


setup = PagesCog.create_setup()
