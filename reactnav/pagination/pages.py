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
Storage for the embeds a paginator shows, and the checks an embed has to pass
before Discord will accept it.
"""

__all__ = ("PageStore", "validate_embed", "footer_text")

import typing

import discord

from .. import errors

MAX_TITLE = 256
MAX_DESCRIPTION = 4096
MAX_FIELDS = 25
MAX_FIELD_NAME = 256
MAX_FIELD_VALUE = 1024
MAX_AUTHOR = 256
MAX_TOTAL = 6000
# Room left for the "position/total" footer.
MAX_POSITION_FOOTER = 16


def _length(value) -> int:
    return len(value) if value else 0


def validate_embed(embed: discord.Embed) -> discord.Embed:
    """
    Ensures the embed is something Discord will render.

    :raises errors.InvalidPage: with the first problem found.
    :returns: the same embed.
    """
    if not isinstance(embed, discord.Embed):
        raise errors.InvalidPage(f"Expected a discord.Embed, got {type(embed).__name__}")

    if not (embed.title or embed.description or embed.fields):
        raise errors.InvalidPage("Page needs a title, a description or at least one field")

    checks = [
        ("title", _length(embed.title), MAX_TITLE),
        ("description", _length(embed.description), MAX_DESCRIPTION),
        ("field count", len(embed.fields), MAX_FIELDS),
        ("author name", _length(embed.author.name), MAX_AUTHOR),
    ]

    for i, field in enumerate(embed.fields):
        checks.append((f"field {i} name", _length(field.name), MAX_FIELD_NAME))
        checks.append((f"field {i} value", _length(field.value), MAX_FIELD_VALUE))

    for what, actual, limit in checks:
        if actual > limit:
            raise errors.InvalidPage(f"Page {what} is {actual} long, but the limit is {limit}")

    # The footer is replaced with the page position when shown.
    total = len(embed) - _length(embed.footer.text)
    limit = MAX_TOTAL - MAX_POSITION_FOOTER
    if total > limit:
        raise errors.InvalidPage(f"Page has {total} characters in total, but the limit is {limit}")

    return embed


def footer_text(index: int, page_count: int) -> str:
    return f"{index + 1}/{page_count}"


class PageStore:
    """
    Ordered pages. Pages can be appended until :meth:`freeze` is called, after
    which the store is read-only apart from the position footer that
    :meth:`stamp` writes.
    """

    def __init__(self):
        self._pages: typing.List[discord.Embed] = []
        self.frozen = False

    def append(self, page: discord.Embed):
        if self.frozen:
            raise errors.AlreadyRunning("Pages cannot be added once the paginator has started")
        self._pages.append(validate_embed(page))

    def freeze(self):
        self.frozen = True

    def stamp(self, index: int) -> discord.Embed:
        """Writes "position/total" into the footer of the page and returns it."""
        page = self._pages[index]
        page.set_footer(text=footer_text(index, len(self._pages)), icon_url=page.footer.icon_url)
        return page

    def __getitem__(self, index: int) -> discord.Embed:
        return self._pages[index]

    def __len__(self):
        return len(self._pages)

    def __iter__(self):
        return iter(self._pages)

    def __bool__(self):
        return bool(self._pages)
