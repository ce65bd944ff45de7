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
Bot settings, as read from the config file.

A config file looks like::

    command_prefix: "p."
    timeout: 300
    control_emojis:
      to_begin: ⏮
      backward: ⏪
      forward: ⏩
      to_end: ⏭
      stop: ⏹

Every key is optional.
"""
import os
import typing
from dataclasses import dataclass
from dataclasses import field

from reactnav import configuration_files
from reactnav import errors
from reactnav import logging_utils
from reactnav.pagination import ControlEmojis
from reactnav.pagination.paginator import DEFAULT_TIMEOUT

__all__ = ("Settings", "DEFAULT_CONFIG_PATH", "DEFAULT_PREFIX")

DEFAULT_CONFIG_PATH = os.getenv("REACTNAV_CONFIG", os.path.join(".", "config", "reactnav.yaml"))

DEFAULT_PREFIX = "p."


@dataclass(frozen=True)
class Settings(logging_utils.Loggable):
    control_emojis: ControlEmojis = field(default_factory=ControlEmojis)
    timeout: float = DEFAULT_TIMEOUT
    command_prefix: str = DEFAULT_PREFIX

    def __post_init__(self):
        if self.timeout <= 0:
            raise ValueError("timeout must be a positive number of seconds")

    @classmethod
    def from_mapping(cls, data: typing.Optional[typing.Mapping]) -> "Settings":
        data = data or {}
        if not isinstance(data, typing.Mapping):
            raise TypeError(f"Expected the config to be a mapping, got {type(data).__name__}")

        return cls(
            control_emojis=ControlEmojis.from_mapping(data.get("control_emojis")),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
            command_prefix=str(data.get("command_prefix", DEFAULT_PREFIX)),
        )

    def to_mapping(self) -> dict:
        return {
            "command_prefix": self.command_prefix,
            "timeout": self.timeout,
            "control_emojis": self.control_emojis.to_mapping(),
        }

    @classmethod
    async def load(cls, path: str = DEFAULT_CONFIG_PATH) -> "Settings":
        """
        Loads settings from the given file. If the file is missing, a default
        one is written there and the defaults are used.
        """
        try:
            data = await configuration_files.get_or_generate(path, cls().to_mapping())
        except errors.ConfigGenerated as ex:
            cls.logger.warning("%s, using the default settings", ex)
            data = ex.data

        return cls.from_mapping(data)
