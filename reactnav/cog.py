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
Shared cog base.
"""
from discord.ext import commands

from reactnav import logging_utils


class CogBase(logging_utils.Loggable, commands.Cog):
    """Contains any shared resource traits we may want to acquire."""

    def __init__(self, bot):
        super().__init__()
        self.bot = bot

    @classmethod
    def create_setup(cls):
        async def setup(bot):
            await bot.add_cog(cls(bot))

        return setup
