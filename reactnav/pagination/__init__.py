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
Utilities for displaying a sequence of embeds as a single Discord message.

The paginator is a state machine that owns one message and a set of Discord
reactions (the "control emojis") placed underneath it. When the one user the
paginator is bound to reacts with a control emoji, the bot removes the
reaction and edits the message to show another page. Reactions from anybody
else are removed and otherwise ignored. After a fixed timeout, or when the
stop reaction is pressed, the reactions are cleared and the message stays on
whatever page it was showing.
"""

from .abc import *
from .discordbridge import *
from .emojis import *
from .navigation import *
from .pages import *
from .paginator import *
