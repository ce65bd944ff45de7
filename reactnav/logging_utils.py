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
Loggable class.
"""
import logging
import typing

__all__ = ("Loggable", "force_verbosity", "configure")

DEFAULT_FORMAT = "%(asctime)s.%(msecs)03d L:%(levelname)s M:%(module)s F:%(funcName)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Loggable:
    """Adds functionality to a class to allow it to log information."""

    logger: logging.Logger

    def __init_subclass__(cls, **_):
        cls.logger: logging.Logger = logging.getLogger(cls.__name__)


def force_verbosity(verbosity: typing.Union[str, int]):
    """Class decorator that pins the logger of a :class:`Loggable` to the given level."""
    if isinstance(verbosity, str):
        verbosity = logging.getLevelName(verbosity.upper())

    def decorator(type_t: typing.Type[Loggable]):
        type_t.logger.log(
            logging.getLevelName("INFO"),
            f"Setting verbosity of {type_t.__qualname__} to be {logging.getLevelName(verbosity)}",
        )
        type_t.logger.setLevel(verbosity)
        return type_t

    return decorator


def configure(level: typing.Union[str, int], suppress: typing.Iterable[str] = (), suppress_to="FATAL"):
    """
    Sets up the root logger, and turns the volume down on any noisy loggers
    named in ``suppress``.
    """
    logging.basicConfig(level=level, format=DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    for other_logger in suppress:
        logging.getLogger(other_logger).setLevel(suppress_to)
