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
The paginator state machine.

A paginator is created, filled with pages, and then run. Running sends the
first page, places the control reactions under it and then waits until
either the timeout elapses or the bound user hits the stop reaction. While
it waits, reactions from the bound user move between pages by editing the
message in place.

Everything that touches the index, the running state or the reaction
cleanup flag happens while holding the paginator's lock, so the timeout and
any number of concurrently delivered reaction events cannot interleave.
"""

__all__ = ("State", "Paginator")

import asyncio
import contextlib
import enum
import typing

import async_timeout
import discord

from .. import errors
from .. import logging_utils
from . import navigation
from .abc import ChatPlatform
from .abc import ReactionAdded
from .emojis import Action
from .emojis import ControlEmojis
from .pages import PageStore

DEFAULT_TIMEOUT = 300


class State(enum.Enum):
    CREATED = enum.auto()
    RUNNING = enum.auto()
    CLOSED = enum.auto()


class Paginator(logging_utils.Loggable):
    """
    Displays one page at a time in a single message, letting one user flip
    between pages with reactions.

    Example usage::

        paginator = Paginator(platform, ctx.channel.id, ctx.author.id, timeout=120)
        for embed in embeds:
            paginator.add(embed)

        await paginator.run()

    :param platform: the chat platform to talk to.
    :param channel_id: the channel to send the paginator message in.
    :param user_id: the only user allowed to control the paginator.
    :param control_emojis: the reactions to use. Defaults are used if omitted.
    :param timeout: seconds after :meth:`run` starts before the paginator
        closes itself. Navigation does not extend this.
    """

    def __init__(
        self,
        platform: ChatPlatform,
        channel_id: int,
        user_id: int,
        control_emojis: ControlEmojis = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if timeout <= 0:
            raise ValueError("Timeout must be a positive number of seconds")

        self.platform = platform
        self.channel_id = channel_id
        self.user_id = user_id
        self.control_emojis = control_emojis if control_emojis is not None else ControlEmojis()
        self.timeout = float(timeout)

        self.pages = PageStore()
        self.index = 0
        self.message_id: typing.Optional[int] = None
        self.state = State.CREATED
        self.reactions_cleared = False
        self.deadline: typing.Optional[float] = None

        self._lock = asyncio.Lock()
        self._closed = asyncio.Event()

    def __repr__(self):
        return (
            f"<{type(self).__name__} state={self.state.name} channel_id={self.channel_id} "
            f"message_id={self.message_id} page={self.index + 1}/{len(self.pages)}>"
        )

    @property
    def active(self) -> bool:
        return self.state is State.RUNNING

    @property
    def closed(self) -> bool:
        return self.state is State.CLOSED

    def add(self, page: discord.Embed):
        """
        Appends a page. Only allowed before :meth:`run`.

        :raises errors.InvalidPage: if Discord would not accept the embed.
        :raises errors.AlreadyRunning: if the paginator has already started.
        """
        if self.state is not State.CREATED:
            raise errors.AlreadyRunning("Pages cannot be added once the paginator has started")
        self.pages.append(page)

    def is_authorized(self, user_id: int) -> bool:
        return user_id == self.user_id

    def check_authorized(self, user_id: int):
        """Same as :meth:`is_authorized`, but raises :class:`errors.Unauthorized` instead of returning False."""
        if not self.is_authorized(user_id):
            raise errors.Unauthorized(user_id)

    async def run(self):
        """
        Sends the paginator and waits until it closes.

        :raises errors.AlreadyRunning: if run was already called.
        :raises errors.NoPages: if no pages were added.
        :raises errors.PlatformFailure: if the message could not be sent, the
            control reactions could not be added, or the reactions could not
            be cleared when the timeout closed the paginator.
        """
        loop = asyncio.get_running_loop()

        async with self._lock:
            if self.state is State.RUNNING:
                raise errors.AlreadyRunning()
            elif self.state is State.CLOSED:
                raise errors.AlreadyRunning("The paginator has already finished running")
            elif not self.pages:
                raise errors.NoPages()

            deadline = loop.time() + self.timeout
            self.message_id = await self.platform.send_message(self.channel_id, self.pages.stamp(0))
            self.pages.freeze()
            self.index = 0
            self.deadline = deadline
            self.state = State.RUNNING
            self.logger.info("Paginator with %s page(s) is running as message %s", len(self.pages), self.message_id)

            self.platform.add_reaction_listener(self._on_reaction_added)

            try:
                for emoji in self.control_emojis.emojis:
                    await self.platform.add_reaction(self.channel_id, self.message_id, emoji)
            except (errors.PlatformFailure, asyncio.CancelledError) as ex:
                self.logger.warning("Could not add control reactions to %s: %r", self.message_id, ex)
                with contextlib.suppress(errors.PlatformFailure):
                    await self._close()
                raise

        try:
            async with async_timeout.timeout_at(self.deadline):
                await self._closed.wait()
        except asyncio.TimeoutError:
            self.logger.info("Paginator on message %s timed out after %ss", self.message_id, self.timeout)
            await self.close()
        except asyncio.CancelledError:
            self.logger.debug("Paginator on message %s was cancelled, closing it", self.message_id)
            with contextlib.suppress(errors.PlatformFailure):
                await self.close()
            raise

    async def close(self):
        """
        Deactivates the paginator and removes the control reactions. Safe to
        call any number of times, from anywhere; the reactions are only ever
        removed once.

        :raises errors.PlatformFailure: if the reactions could not be removed.
            The paginator is closed regardless.
        """
        async with self._lock:
            await self._close()

    async def _close(self):
        if self.state is not State.CLOSED:
            self.logger.debug("Closing paginator on message %s", self.message_id)
            self.state = State.CLOSED
            self.platform.remove_reaction_listener(self._on_reaction_added)
            self._closed.set()

        if self.reactions_cleared or self.message_id is None:
            return

        # Marked first: a failed removal is not retried.
        self.reactions_cleared = True
        try:
            await self.platform.remove_all_reactions(self.channel_id, self.message_id)
        except errors.PlatformFailure as ex:
            self.logger.warning("Could not clear reactions from %s: %s", self.message_id, ex)
            raise

    async def first_page(self):
        await self._navigate_from_outside(Action.TO_BEGIN)

    async def previous_page(self):
        await self._navigate_from_outside(Action.BACKWARD)

    async def next_page(self):
        await self._navigate_from_outside(Action.FORWARD)

    async def last_page(self):
        await self._navigate_from_outside(Action.TO_END)

    async def _navigate_from_outside(self, action: Action):
        async with self._lock:
            if self.active:
                await self._navigate(action)

    async def _navigate(self, action: Action):
        target = navigation.navigate(self.index, len(self.pages), action)
        if target == self.index:
            return

        # The index only moves once the message shows the new page.
        await self._render(target)
        self.logger.debug("Message %s moved from page %s to %s", self.message_id, self.index + 1, target + 1)
        self.index = target

    async def _render(self, index: int):
        page = self.pages.stamp(index)
        await self.platform.edit_message(self.channel_id, self.message_id, page)

    async def _retract(self, event: ReactionAdded):
        try:
            await self.platform.remove_reaction(event.channel_id, event.message_id, event.emoji, event.user_id)
        except errors.PlatformFailure as ex:
            self.logger.debug("Could not remove reaction %s by %s: %s", event.emoji, event.user_id, ex)

    async def _on_reaction_added(self, event: ReactionAdded):
        if event.channel_id != self.channel_id or event.message_id != self.message_id:
            return

        async with self._lock:
            if not self.active:
                return

            if not self.is_authorized(event.user_id):
                self.logger.debug("Ignoring %s from unauthorised user %s", event.emoji, event.user_id)
                await self._retract(event)
                return

            action = self.control_emojis.action_for(event.emoji)
            if action is None:
                return

            try:
                if action is Action.STOP:
                    self.logger.debug("User %s stopped paginator on message %s", event.user_id, self.message_id)
                    await self._close()
                else:
                    await self._retract(event)
                    await self._navigate(action)
            except errors.IndexBounds as ex:
                self.logger.debug("Ignoring %s on message %s: %s", action.value, self.message_id, ex)
            except errors.PlatformFailure as ex:
                self.logger.warning("Could not %s on message %s: %s", action.value, self.message_id, ex)
