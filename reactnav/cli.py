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
Application entry point. This reads the settings and then starts the bot.

If a path is provided as the first argument, we read the settings from
there, otherwise, we use $REACTNAV_CONFIG or ./config/reactnav.yaml. A
default file is written if none exists.
"""
import asyncio
import logging
import os
import sys

from reactnav import bot as client
from reactnav import logging_utils
from reactnav import settings

LOGGERS_TO_SUPPRESS = ["discord.http"]

SUPPRESS_TO_LEVEL = "FATAL"


async def _start(config_path, token):
    bot_settings = await settings.Settings.load(config_path)
    async with client.Bot(bot_settings) as bot:
        await bot.start(token)


def cli(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    logging_utils.configure(os.getenv("LOGGER_LEVEL", "INFO"), LOGGERS_TO_SUPPRESS, SUPPRESS_TO_LEVEL)
    logger = logging.getLogger("reactnav")

    try:
        token = os.environ["REACTNAV_TOKEN"]
    except KeyError:
        logger.critical("REACTNAV_TOKEN is not set, so I cannot log in")
        return 1

    config_path = argv[0] if argv else settings.DEFAULT_CONFIG_PATH
    try:
        asyncio.run(_start(config_path, token))
    except client.BotInterrupt as ex:
        logger.critical(f"Received interrupt {ex!r}")
    except Exception as ex:
        logger.exception("An unrecoverable error occurred.", exc_info=ex)
        return 1
    else:
        logger.info("The bot stopped executing as expected")
    finally:
        logger.critical("Process is terminating NOW.")

    return 0
