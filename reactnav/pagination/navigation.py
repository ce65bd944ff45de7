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
Index arithmetic for moving between pages. Nothing in here touches Discord.
"""

__all__ = ("navigate", "NAVIGATION_ACTIONS")

from .. import errors
from .emojis import Action

NAVIGATION_ACTIONS = frozenset({Action.TO_BEGIN, Action.BACKWARD, Action.FORWARD, Action.TO_END})


def navigate(index: int, page_count: int, action: Action) -> int:
    """
    Works out the index that ``action`` moves to from ``index``.

    Jumping to the first or last page is always allowed, even when already
    there. Stepping forwards off the last page or backwards off the first page
    is rejected.

    :raises errors.IndexBounds: if the move would leave ``[0, page_count)``.
    :raises ValueError: if the action does not move between pages.
    """
    if action not in NAVIGATION_ACTIONS:
        raise ValueError(f"{action} is not a navigation action")

    if page_count <= 0:
        raise errors.IndexBounds(index, page_count, "There are no pages to navigate")

    if action is Action.TO_BEGIN:
        return 0
    elif action is Action.TO_END:
        return page_count - 1
    elif action is Action.FORWARD:
        if index >= page_count - 1:
            raise errors.IndexBounds(index + 1, page_count, "Page index is already at the last page")
        return index + 1
    else:
        if index <= 0:
            raise errors.IndexBounds(index - 1, page_count, "Page index is already at the first page")
        return index - 1
