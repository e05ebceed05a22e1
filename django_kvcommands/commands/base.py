"""Base classes for canonical commands and responses.

Commands are immutable value objects. Each command class names its response
class; the dispatcher builds exactly one response of that class per
dispatch. Response payload fields default to their zero value, which is what
a failed response carries.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Self

from django_kvcommands.server import ServerIdentity
from django_kvcommands.types import CommandFlags

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True, slots=True, kw_only=True)
class Response:
    success: bool = True
    message: str | None = None

    @classmethod
    def failed(cls, message: str) -> Self:
        """A failure response with every payload field at its zero value."""
        return cls(success=False, message=message)


@dataclass(frozen=True, slots=True, kw_only=True)
class Command:
    """Common fields of every command.

    Subclasses set ``response_class``; ``operation`` is derived from the class
    name (``StringSetRange`` -> ``string_set_range``).
    """

    operation: ClassVar[str] = ""
    response_class: ClassVar[type[Response]] = Response

    server: ServerIdentity
    flags: CommandFlags = CommandFlags.NONE

    def __init_subclass__(cls) -> None:
        cls.operation = _CAMEL_BOUNDARY.sub("_", cls.__name__).lower()


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyCommand(Command):
    """A command against a single key."""

    key: str
