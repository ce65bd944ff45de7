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
Handles reading config files, and writing out a default one when there is
nothing to read.
"""
import io  # Streams
import json
import os  # File operations
import typing  # Type checking

import aiofiles  # Async file IO
import yaml

from reactnav import errors
from reactnav import logging_utils

# Functions to call to deserialize each type.
deserializers = {".json": json.load, ".yaml": yaml.safe_load, ".yml": yaml.safe_load}

GENERATED_FILE_MODE = 0o660


class ConfigFile(logging_utils.Loggable):
    """
    Representation of a configuration file that allows for read-only
    access. This model assumes that the config file is not changeable at
    runtime; thus the data is cached after the first read.

    This also will attempt to guess the file extension if omitted, for example,
    if you attempt to load `foo`, but `foo` does not exist, the class will
    attempt to resolve `foo.json`, then `foo.yaml`, etc. If one of those is
    found, then that is loaded instead.

    Note. This is not thread-safe.

    :param path: the path of the file to read. If extension is omitted, we
        attempt to find it.
    :param should_guess: defaults to true. If true, we allow guessing of the
        extension if we fail to find it.
    """

    def __init__(self, path, *, should_guess=True):
        resolved = self._get_extension(path, should_guess)

        if not resolved:
            raise ValueError(f"{path!r} does not have a recognised config extension")

        path, ext = resolved
        if not os.access(path, os.R_OK):
            raise PermissionError(f"I do not have read access to {path!r}.")

        self.path = path
        self._value = None
        self.deserializer = deserializers[ext]

    @staticmethod
    def _get_extension(base: str, should_guess: bool = True) -> typing.Optional[typing.Tuple[str, str]]:
        """
        Assuming that base is not found as an actual file path, attempt
        to resolve the config file by guessing the extension. We return the
        first match for the file name, with the extension. This will also work
        if the extension already exists. If nothing can be found, then an
        exception is raised.
        """
        for ext in deserializers:
            if os.path.isfile(base) and base.endswith(ext):
                return base, ext
            elif os.path.isfile(base + ext) and should_guess:
                return base + ext, ext

        if not os.path.exists(base):
            raise FileNotFoundError(f"{base!r} does not exist.")
        elif not os.path.isfile(base):
            raise TypeError(f"{base!r} is not a valid file.")
        else:
            return None

    def _describe_deserializer(self):
        return f'{getattr(self.deserializer, "__module__")}.{self.deserializer.__name__}'

    async def async_get(self):
        """Asynchronously reads the config from file."""
        if self._value is None:
            self.logger.info(f"Asynchronously deserialising {self.path} using {self._describe_deserializer()}")
            async with aiofiles.open(self.path, encoding="utf-8") as fp:
                with io.StringIO(await fp.read()) as str_io:
                    self._value = self.deserializer(str_io)

        return self._value


async def generate(path, data):
    """Writes ``data`` out as YAML, creating any missing parent directories."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    text = yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    async with aiofiles.open(path, "w", encoding="utf-8") as fp:
        await fp.write(text)

    os.chmod(path, GENERATED_FILE_MODE)


async def get_or_generate(path, default):
    """
    Reads the config at ``path``. If there is no such file, the default is
    written there instead so it can be edited, and
    :class:`errors.ConfigGenerated` is raised carrying the default data.

    :param path: the config file. The extension may be omitted.
    :param default: the data to write if the file does not exist.
    :returns: the deserialized data.
    """
    try:
        config = ConfigFile(path)
    except FileNotFoundError:
        if not os.path.splitext(path)[1]:
            path += ".yaml"

        ConfigFile.logger.warning("No config found at %s, generating a default one", path)
        await generate(path, default)
        raise errors.ConfigGenerated(path, default) from None

    return await config.async_get()
