from __future__ import annotations

import asyncio
import logging

import discord

from reactnav import errors
from reactnav.pagination import ChatPlatform
from reactnav.pagination import ReactionAdded

LOGGER = logging.getLogger("reactnav.test.fakes")

CHANNEL_ID = 1234
USER_ID = 42
OTHER_USER_ID = 99


def make_pages(*titles: str) -> list[discord.Embed]:
    return [discord.Embed(title=title, description=f"Content of {title}") for title in titles]


class FakePlatform(ChatPlatform):
    """Records every call, and fails the operations listed in ``failing``."""

    def __init__(self):
        self.calls: list[tuple] = []
        self.listeners = []
        self.failing: set[str] = set()
        self.edited_footers: list[str] = []
        self.sent_footers: list[str] = []
        self._next_message_id = 5000

    async def _record(self, operation, *args):
        self.calls.append((operation, *args))
        # Yield, as a real request would.
        await asyncio.sleep(0)
        if operation in self.failing:
            raise errors.PlatformFailure(operation, RuntimeError(f"{operation} exploded"))

    def count(self, operation) -> int:
        return sum(1 for call in self.calls if call[0] == operation)

    def calls_to(self, operation) -> list[tuple]:
        return [call[1:] for call in self.calls if call[0] == operation]

    async def send_message(self, channel_id, page):
        await self._record("send_message", channel_id, page)
        self.sent_footers.append(page.footer.text)
        self._next_message_id += 1
        return self._next_message_id

    async def edit_message(self, channel_id, message_id, page):
        await self._record("edit_message", channel_id, message_id, page)
        self.edited_footers.append(page.footer.text)

    async def add_reaction(self, channel_id, message_id, emoji):
        await self._record("add_reaction", channel_id, message_id, emoji)

    async def remove_reaction(self, channel_id, message_id, emoji, user_id):
        await self._record("remove_reaction", channel_id, message_id, emoji, user_id)

    async def remove_all_reactions(self, channel_id, message_id):
        await self._record("remove_all_reactions", channel_id, message_id)

    def add_reaction_listener(self, listener):
        self.listeners.append(listener)

    def remove_reaction_listener(self, listener):
        if listener in self.listeners:
            self.listeners.remove(listener)

    async def react(self, message_id, emoji, user_id=USER_ID, channel_id=CHANNEL_ID):
        """Delivers a reaction to every listener concurrently, as Discord.py would."""
        event = ReactionAdded(channel_id=channel_id, message_id=message_id, user_id=user_id, emoji=emoji)
        LOGGER.debug("Delivering %s", event)
        await asyncio.gather(*(listener(event) for listener in list(self.listeners)))


async def wait_until(predicate, timeout=1.0):
    async def poll():
        while not predicate():
            await asyncio.sleep(0.001)

    await asyncio.wait_for(poll(), timeout)
