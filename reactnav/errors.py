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
Implementations of errors.
"""

__all__ = (
    "PaginatorError",
    "AlreadyRunning",
    "NoPages",
    "IndexBounds",
    "Unauthorized",
    "InvalidPage",
    "PlatformFailure",
    "ConfigGenerated",
)


class PaginatorError(RuntimeError):
    """
    Base for anything a paginator can complain about. None of these are fatal;
    the paginator is always left in a consistent state when one is raised.
    """

    default_message = "The paginator could not perform that action"

    def __init__(self, message: str = None):
        self.message = message if message else self.default_message

    def __str__(self):
        return self.message


class AlreadyRunning(PaginatorError):
    default_message = "The paginator is already running"


class NoPages(PaginatorError):
    default_message = "No pages were added to the paginator"


class IndexBounds(PaginatorError):
    def __init__(self, index: int, page_count: int, message: str = None):
        self.index = index
        self.page_count = page_count
        super().__init__(message or f"Page index {index} is out of bounds for {page_count} page(s)")


class Unauthorized(PaginatorError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User {user_id} is not allowed to control this paginator")


class InvalidPage(PaginatorError):
    default_message = "That page cannot be displayed"


class PlatformFailure(PaginatorError):
    """Wraps whatever the chat platform raised while performing ``operation``."""

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class ConfigGenerated(RuntimeError):
    """
    Raised when a configuration file did not exist and a default one was
    written in its place. The default data is available as ``data``.
    """

    def __init__(self, path: str, data):
        self.path = path
        self.data = data

    def __str__(self):
        return f"Generated a new default configuration at {self.path}"
