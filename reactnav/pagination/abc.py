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
Abstract base classes for the pagination module.
"""

__all__ = ("ReactionAdded", "ReactionListener", "ChatPlatform")

import typing
from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass

import discord


@dataclass(frozen=True)
class ReactionAdded:
    """Somebody reacted to a message."""

    channel_id: int
    message_id: int
    user_id: int
    emoji: str


ReactionListener = typing.Callable[[ReactionAdded], typing.Awaitable[None]]


class ChatPlatform(ABC):
    """
    Everything a paginator needs from the chat service it lives on.

    Implementations must raise :class:`reactnav.errors.PlatformFailure` for
    any failure to talk to the service, and must not deliver reaction events
    caused by the bot's own account. Each listener may be invoked
    concurrently with itself; the paginator does its own serialisation.
    """

    @abstractmethod
    async def send_message(self, channel_id: int, page: discord.Embed) -> int:
        """Sends the page to the channel and returns the new message ID."""
        ...

    @abstractmethod
    async def edit_message(self, channel_id: int, message_id: int, page: discord.Embed) -> None:
        ...

    @abstractmethod
    async def add_reaction(self, channel_id: int, message_id: int, emoji: str) -> None:
        ...

    @abstractmethod
    async def remove_reaction(self, channel_id: int, message_id: int, emoji: str, user_id: int) -> None:
        """Removes one user's reaction."""
        ...

    @abstractmethod
    async def remove_all_reactions(self, channel_id: int, message_id: int) -> None:
        ...

    @abstractmethod
    def add_reaction_listener(self, listener: ReactionListener) -> None:
        """Starts delivering reaction-added events to the listener."""
        ...

    @abstractmethod
    def remove_reaction_listener(self, listener: ReactionListener) -> None:
        """Stops delivering events to the listener. Unknown listeners are ignored."""
        ...
