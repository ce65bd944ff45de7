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
Control emojis: the reactions placed under a paginator message, and the
actions each of them maps to.
"""

__all__ = ("Action", "ControlEmojis", "DEFAULT_EMOJIS", "normalize")

import enum
import typing

from .. import logging_utils


class Action(enum.Enum):
    """Logical actions a control emoji can trigger."""

    TO_BEGIN = "to_begin"
    BACKWARD = "backward"
    FORWARD = "forward"
    TO_END = "to_end"
    STOP = "stop"


# Order here is the order reactions are added to the message.
DEFAULT_EMOJIS = {
    Action.TO_BEGIN: "\N{BLACK LEFT-POINTING DOUBLE TRIANGLE WITH VERTICAL BAR}",
    Action.BACKWARD: "\N{BLACK LEFT-POINTING DOUBLE TRIANGLE}",
    Action.FORWARD: "\N{BLACK RIGHT-POINTING DOUBLE TRIANGLE}",
    Action.TO_END: "\N{BLACK RIGHT-POINTING DOUBLE TRIANGLE WITH VERTICAL BAR}",
    Action.STOP: "\N{BLACK SQUARE FOR STOP}",
}

_ALIASES = {"toBegin": Action.TO_BEGIN, "toEnd": Action.TO_END}

VARIATION_SELECTOR_16 = "\N{VARIATION SELECTOR-16}"


def normalize(emoji: str) -> str:
    """Discord may or may not append VS16 to a glyph, so we compare without it."""
    return str(emoji).replace(VARIATION_SELECTOR_16, "").strip()


class ControlEmojis(logging_utils.Loggable):
    """
    Immutable mapping of each :class:`Action` to the glyph that triggers it.

    Any action not given a glyph gets its default from :attr:`DEFAULT_EMOJIS`
    here in the constructor, so the defaults never need resolving later.
    Iterating yields ``(action, emoji)`` pairs in a fixed order: to-begin,
    backward, forward, to-end, stop.

    :raises ValueError: if a glyph is empty or two actions share a glyph.
    """

    def __init__(
        self,
        *,
        to_begin: str = None,
        backward: str = None,
        forward: str = None,
        to_end: str = None,
        stop: str = None,
    ):
        given = {
            Action.TO_BEGIN: to_begin,
            Action.BACKWARD: backward,
            Action.FORWARD: forward,
            Action.TO_END: to_end,
            Action.STOP: stop,
        }

        pairs = []
        lookup = {}
        for action, default in DEFAULT_EMOJIS.items():
            emoji = given[action]
            if emoji is None:
                emoji = default

            key = normalize(emoji)
            if not key:
                raise ValueError(f"Emoji for {action.value} cannot be empty")
            if key in lookup:
                raise ValueError(f"{emoji!r} is used for both {lookup[key].value} and {action.value}")

            pairs.append((action, str(emoji)))
            lookup[key] = action

        self._pairs: typing.Tuple[typing.Tuple[Action, str], ...] = tuple(pairs)
        self._lookup: typing.Dict[str, Action] = lookup

    @classmethod
    def from_mapping(cls, mapping: typing.Optional[typing.Mapping[str, str]]) -> "ControlEmojis":
        """
        Builds the emojis from a config mapping. Keys are the action names
        (``to_begin``, ``backward``, ``forward``, ``to_end``, ``stop``); the
        camel case ``toBegin`` and ``toEnd`` are also understood.
        """
        mapping = mapping or {}
        if not isinstance(mapping, typing.Mapping):
            raise TypeError(f"Expected control emojis to be a mapping, got {type(mapping).__name__}")

        kwargs = {}
        for key, emoji in mapping.items():
            if key in _ALIASES:
                action = _ALIASES[key]
            else:
                try:
                    action = Action(key)
                except ValueError:
                    cls.logger.warning("Ignoring unknown control emoji option %r", key)
                    continue

            if emoji is not None:
                kwargs[action.value] = str(emoji)

        return cls(**kwargs)

    def to_mapping(self) -> typing.Dict[str, str]:
        return {action.value: emoji for action, emoji in self._pairs}

    def __iter__(self) -> typing.Iterator[typing.Tuple[Action, str]]:
        return iter(self._pairs)

    def __len__(self):
        return len(self._pairs)

    def __getitem__(self, action: Action) -> str:
        for candidate, emoji in self._pairs:
            if candidate is action:
                return emoji
        raise KeyError(action)

    def __eq__(self, other):
        if isinstance(other, ControlEmojis):
            return self._pairs == other._pairs
        return NotImplemented

    def __hash__(self):
        return hash(self._pairs)

    def __repr__(self):
        fields = ", ".join(f"{action.value}={emoji!r}" for action, emoji in self._pairs)
        return f"ControlEmojis({fields})"

    def action_for(self, emoji: str) -> typing.Optional[Action]:
        """Returns the action for the glyph, or None if it is not a control emoji."""
        return self._lookup.get(normalize(emoji))

    @property
    def emojis(self) -> typing.List[str]:
        return [emoji for _, emoji in self._pairs]
