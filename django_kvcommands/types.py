"""Canonical option enumerations shared by commands and responses.

These are the backend-agnostic values callers put on commands. The
translation to the store's native options lives in
:mod:`django_kvcommands.translate`.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import StrEnum

# Relative or absolute expiry accepted by key commands
type ExpiryT = timedelta | datetime


class SortedOrder(StrEnum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class RangeExclude(StrEnum):
    """Which bounds of a range are exclusive."""

    NONE = "none"
    START = "start"
    STOP = "stop"
    BOTH = "both"


class SetOperation(StrEnum):
    UNION = "union"
    INTERSECT = "intersect"
    DIFFERENCE = "difference"


class Aggregate(StrEnum):
    SUM = "sum"
    MIN = "min"
    MAX = "max"


class CommandFlags(StrEnum):
    """Execution hints carried by every command."""

    NONE = "none"
    HIGH_PRIORITY = "high_priority"
    FIRE_AND_FORGET = "fire_and_forget"
    PREFER_MASTER = "prefer_master"
    DEMAND_MASTER = "demand_master"
    PREFER_REPLICA = "prefer_replica"
    DEMAND_REPLICA = "demand_replica"
    NO_REDIRECT = "no_redirect"
    NO_SCRIPT_CACHE = "no_script_cache"


class When(StrEnum):
    """Condition under which a write is applied."""

    ALWAYS = "always"
    EXISTS = "exists"
    NOT_EXISTS = "not_exists"


class Bitwise(StrEnum):
    AND = "and"
    OR = "or"
    XOR = "xor"
    NOT = "not"


class SortType(StrEnum):
    NUMERIC = "numeric"
    ALPHABETIC = "alphabetic"


class KeyType(StrEnum):
    """Data types a key can hold."""

    STRING = "string"
    LIST = "list"
    HASH = "hash"
    SET = "set"
    SORTED_SET = "sorted_set"


class MigrateOption(StrEnum):
    NONE = "none"
    COPY = "copy"
    REPLACE = "replace"


class KeyMatchMode(StrEnum):
    """How a key query token is matched against key names."""

    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"


class LogLevel(StrEnum):
    DEBUG = "debug"
    VERBOSE = "verbose"
    NOTICE = "notice"
    WARNING = "warning"


class AppendFsync(StrEnum):
    ALWAYS = "always"
    EVERYSEC = "everysec"
    NO = "no"
