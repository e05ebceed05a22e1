from __future__ import annotations

from dataclasses import dataclass

from django_kvcommands.commands.base import Command, KeyCommand, Response
from django_kvcommands.types import SetOperation

# Responses


@dataclass(frozen=True, slots=True, kw_only=True)
class SetRemoveResponse(Response):
    remove_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class SetRandomMembersResponse(Response):
    members: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SetRandomMemberResponse(Response):
    member: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SetPopResponse(Response):
    pop_value: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SetMoveResponse(Response):
    move_success: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class SetMembersResponse(Response):
    members: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SetLengthResponse(Response):
    length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class SetContainsResponse(Response):
    exists: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class SetCombineResponse(Response):
    combine_values: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SetCombineAndStoreResponse(Response):
    count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class SetAddResponse(Response):
    add_count: int = 0


# Commands


@dataclass(frozen=True, slots=True, kw_only=True)
class SetRemove(KeyCommand):
    response_class = SetRemoveResponse

    members: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class SetRandomMembers(KeyCommand):
    """``count`` random members; a negative count allows repeats."""

    response_class = SetRandomMembersResponse

    count: int


@dataclass(frozen=True, slots=True, kw_only=True)
class SetRandomMember(KeyCommand):
    response_class = SetRandomMemberResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class SetPop(KeyCommand):
    response_class = SetPopResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class SetMove(Command):
    response_class = SetMoveResponse

    source_key: str
    destination_key: str
    member: str


@dataclass(frozen=True, slots=True, kw_only=True)
class SetMembers(KeyCommand):
    response_class = SetMembersResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class SetLength(KeyCommand):
    response_class = SetLengthResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class SetContains(KeyCommand):
    response_class = SetContainsResponse

    member: str


@dataclass(frozen=True, slots=True, kw_only=True)
class SetCombine(Command):
    """Union, intersection or difference of ``keys``, in the given order."""

    response_class = SetCombineResponse

    operation_type: SetOperation
    keys: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class SetCombineAndStore(Command):
    response_class = SetCombineAndStoreResponse

    operation_type: SetOperation
    destination_key: str
    source_keys: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class SetAdd(KeyCommand):
    response_class = SetAddResponse

    members: tuple[str, ...]
