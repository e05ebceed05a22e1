"""Dispatch core shared by every command family.

A family mixin provides, for each operation, either a ``_plan_<operation>``
method or a ``_run_<operation>``/``_arun_<operation>`` pair:

- a *plan* is pure: it validates the command, translates its options and
  returns the backend calls plus a decoder for their results. The same plan
  runs on sync and async handles.
- a *run* flow is for multi-step administrative operations that need the
  registry or several round trips; it returns the response payload.

Backend faults are handled here and nowhere else.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from django_kvcommands.exceptions import (
    BackendError,
    CommandRejected,
    NotSupportedError,
    UnsupportedNumericKindError,
    _main_exceptions,
)
from django_kvcommands.numeric import NumericKind, resolve_kind
from django_kvcommands.translate import EnumTranslator, decode_reply

if TYPE_CHECKING:
    from django_kvcommands.commands.base import Command, Response
    from django_kvcommands.pool import ConnectionRegistry

logger = logging.getLogger(__name__)

type Decoder = Callable[[list[Any]], dict[str, Any]]


@dataclass(frozen=True, slots=True)
class Call:
    """One backend method call."""

    method: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


def call(method: str, *args: Any, **kwargs: Any) -> Call:
    return Call(method, args, kwargs)


def _no_payload(results: list[Any]) -> dict[str, Any]:
    return {}


@dataclass(frozen=True, slots=True)
class Plan:
    """Backend calls for one command and the decoder for their results.

    More than one call is sent through a non-transactional pipeline. Results
    reach the decoder with UTF-8 bytes decoded to text, unless ``raw`` is set.
    """

    calls: tuple[Call, ...]
    decode: Decoder = _no_payload
    raw: bool = False


def plan(*calls: Call, decode: Decoder = _no_payload, raw: bool = False) -> Plan:
    return Plan(calls, decode, raw)


def returns(name: str, convert: Callable[[Any], Any] | None = None) -> Decoder:
    """Decoder storing the first result under ``name``, optionally converted."""

    def decode(results: list[Any]) -> dict[str, Any]:
        value = results[0]
        return {name: convert(value) if convert is not None else value}

    return decode


def require(condition: Any, message: str) -> None:
    """Reject the command with ``message`` unless ``condition`` holds."""
    if not condition:
        raise CommandRejected(message)


class BaseDispatcher:
    """Dispatches canonical commands against registry-owned handles.

    Args:
        registry: Owner of the connection handles.
        translator: Option tables; a lenient translator is built by default.
        ignore_exceptions: Report backend faults as ``success=False`` responses
            instead of raising :class:`BackendError`.
        log_ignored_exceptions: Log faults that ``ignore_exceptions`` swallowed.
    """

    def __init__(
        self,
        registry: ConnectionRegistry,
        *,
        translator: EnumTranslator | None = None,
        ignore_exceptions: bool = False,
        log_ignored_exceptions: bool = False,
    ) -> None:
        self.registry = registry
        self.translator = translator or EnumTranslator()
        self._ignore_exceptions = ignore_exceptions
        self._log_ignored_exceptions = log_ignored_exceptions
        self._logger = logger

    def supports(self, command: Command) -> bool:
        operation = command.operation
        return hasattr(self, f"_plan_{operation}") or hasattr(self, f"_run_{operation}")

    def _handle_exception(self, command: Command, exc: Exception) -> Response:
        if self._ignore_exceptions:
            if self._log_ignored_exceptions:
                self._logger.exception("Exception ignored")
            return command.response_class.failed(str(exc))
        raise BackendError(command.operation, command.server.endpoint) from exc

    def _results(self, command_plan: Plan, results: list[Any]) -> list[Any]:
        return results if command_plan.raw else decode_reply(results)

    def _build_response(self, command: Command, payload: dict[str, Any], *, discard: bool) -> Response:
        if discard:
            return command.response_class()
        return command.response_class(**payload)

    # =========================================================================
    # Sync
    # =========================================================================

    def dispatch(self, command: Command) -> Response:
        """Execute ``command`` and return its response.

        Raises:
            NotSupportedError: No family handles the command's operation.
            BackendError: The store failed and ``ignore_exceptions`` is off.
        """
        operation = command.operation
        runner = getattr(self, f"_run_{operation}", None)
        planner = getattr(self, f"_plan_{operation}", None)
        if runner is None and planner is None:
            raise NotSupportedError(operation, type(self).__name__)

        options = self.translator.flags.to_native(command.flags)
        logger.debug("Dispatching %s to %s (%s)", operation, command.server.endpoint, options.target)
        try:
            if runner is not None:
                payload = runner(command)
            else:
                command_plan = planner(command)
                client = self.registry.acquire(command.server)
                results = self._results(command_plan, self._execute(client, command_plan))
                payload = command_plan.decode(results)
        except CommandRejected as e:
            return command.response_class.failed(str(e))
        except _main_exceptions as e:
            return self._handle_exception(command, e)
        return self._build_response(command, payload, discard=options.fire_and_forget)

    def execute(self, *commands: Command) -> list[Response]:
        """Dispatch several commands in order."""
        return [self.dispatch(command) for command in commands]

    def _execute(self, client: Any, command_plan: Plan) -> list[Any]:
        if len(command_plan.calls) == 1:
            single = command_plan.calls[0]
            return [getattr(client, single.method)(*single.args, **single.kwargs)]

        pipe = client.pipeline(transaction=False)
        for queued in command_plan.calls:
            getattr(pipe, queued.method)(*queued.args, **queued.kwargs)
        return pipe.execute()

    # =========================================================================
    # Async
    # =========================================================================

    async def adispatch(self, command: Command) -> Response:
        """Async version of :meth:`dispatch`."""
        operation = command.operation
        runner = getattr(self, f"_arun_{operation}", None)
        planner = getattr(self, f"_plan_{operation}", None)
        if runner is None and planner is None:
            raise NotSupportedError(operation, type(self).__name__)

        options = self.translator.flags.to_native(command.flags)
        logger.debug("Dispatching %s to %s (%s)", operation, command.server.endpoint, options.target)
        try:
            if runner is not None:
                payload = await runner(command)
            else:
                command_plan = planner(command)
                client = await self.registry.aacquire(command.server)
                results = self._results(command_plan, await self._aexecute(client, command_plan))
                payload = command_plan.decode(results)
        except CommandRejected as e:
            return command.response_class.failed(str(e))
        except _main_exceptions as e:
            return self._handle_exception(command, e)
        return self._build_response(command, payload, discard=options.fire_and_forget)

    async def aexecute(self, *commands: Command) -> list[Response]:
        return [await self.adispatch(command) for command in commands]

    async def _aexecute(self, client: Any, command_plan: Plan) -> list[Any]:
        if len(command_plan.calls) == 1:
            single = command_plan.calls[0]
            return [await getattr(client, single.method)(*single.args, **single.kwargs)]

        pipe = client.pipeline(transaction=False)
        for queued in command_plan.calls:
            getattr(pipe, queued.method)(*queued.args, **queued.kwargs)
        return await pipe.execute()


def numeric_kind(kind: Any) -> NumericKind:
    """Resolve a command's numeric kind, rejecting unsupported ones."""
    try:
        return resolve_kind(kind)
    except UnsupportedNumericKindError as e:
        raise CommandRejected(str(e)) from e


def millis_to_timedelta(value: int | None) -> timedelta | None:
    """``PTTL`` result to a timedelta; negative replies mean no expiry."""
    if value is None or value < 0:
        return None
    return timedelta(milliseconds=value)
