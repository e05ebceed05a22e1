"""Exceptions for django-kvcommands.

Precondition failures never leave the dispatcher as exceptions; they are
reported as ``success=False`` responses. Backend faults are wrapped into
:class:`BackendError` in a single place, or turned into failure responses
when the dispatcher runs with ``ignore_exceptions``.
"""

import socket

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import ResponseError as RedisResponseError
from redis.exceptions import TimeoutError as RedisTimeoutError

# Faults raised by the wire client. These are used by the dispatcher and the
# connection registry.
_main_exceptions: tuple[type[Exception], ...] = (
    socket.timeout,
    RedisConnectionError,
    RedisTimeoutError,
    RedisResponseError,
    RedisError,
)


class BackendError(Exception):
    """Raised when the backing store fails while executing a command.

    Always raised ``from`` the original fault, which stays available as
    ``__cause__``.

    Attributes:
        operation: Name of the operation that was being dispatched.
        endpoint: ``host:port/db`` of the targeted server.

    Example:
        Handling backend faults::

            from django_kvcommands.exceptions import BackendError

            try:
                response = dispatcher.dispatch(StringGet(server=server, keys=("a",)))
            except BackendError as e:
                logger.warning("cache unavailable for %s: %s", e.operation, e.__cause__)
    """

    def __init__(self, operation: str, endpoint: str) -> None:
        self.operation = operation
        self.endpoint = endpoint
        super().__init__(operation, endpoint)

    def __str__(self) -> str:
        msg = f"Operation '{self.operation}' failed on {self.endpoint}"
        if self.__cause__ is not None:
            msg += f": {self.__cause__}"
        return msg


class CommandRejected(Exception):
    """Raised by command planning when a command fails a precondition.

    The dispatcher converts it into a failure response carrying the message;
    the backend is never contacted.
    """


class UnsupportedNumericKindError(ValueError):
    """Raised when a numeric operand kind is outside the supported set."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Numeric kind {kind!r} is not supported")


class NotSupportedError(Exception):
    """Raised when an object is dispatched that no dispatcher family handles.

    Attributes:
        operation: The operation that is not supported.
        backend: Optional name of the dispatcher that doesn't support it.
    """

    def __init__(self, operation: str, backend: str | None = None) -> None:
        self.operation = operation
        self.backend = backend
        super().__init__(operation, backend)

    def __str__(self) -> str:
        msg = f"Operation '{self.operation}' is not supported"
        if self.backend:
            msg += f" by {self.backend}"
        return msg
