"""Canonical commands and responses, one pair per operation."""

from django_kvcommands.commands.base import Command, KeyCommand, Response
from django_kvcommands.commands.hashes import (
    HashDecrement,
    HashDecrementResponse,
    HashDelete,
    HashDeleteResponse,
    HashExists,
    HashExistsResponse,
    HashGet,
    HashGetAll,
    HashGetAllResponse,
    HashGetResponse,
    HashIncrement,
    HashIncrementResponse,
    HashKeys,
    HashKeysResponse,
    HashLength,
    HashLengthResponse,
    HashScan,
    HashScanResponse,
    HashSet,
    HashSetResponse,
    HashValues,
    HashValuesResponse,
)
from django_kvcommands.commands.keys import (
    KeyDelete,
    KeyDeleteResponse,
    KeyDump,
    KeyDumpResponse,
    KeyExists,
    KeyExistsResponse,
    KeyExpire,
    KeyExpireResponse,
    KeyGetType,
    KeyGetTypeResponse,
    KeyMigrate,
    KeyMigrateResponse,
    KeyMove,
    KeyMoveResponse,
    KeyPersist,
    KeyPersistResponse,
    KeyRandom,
    KeyRandomResponse,
    KeyRename,
    KeyRenameResponse,
    KeyRestore,
    KeyRestoreResponse,
    KeyTimeToLive,
    KeyTimeToLiveResponse,
)
from django_kvcommands.commands.lists import (
    ListGetByIndex,
    ListGetByIndexResponse,
    ListInsertAfter,
    ListInsertAfterResponse,
    ListInsertBefore,
    ListInsertBeforeResponse,
    ListLeftPop,
    ListLeftPopResponse,
    ListLeftPush,
    ListLeftPushResponse,
    ListLength,
    ListLengthResponse,
    ListRange,
    ListRangeResponse,
    ListRemove,
    ListRemoveResponse,
    ListRightPop,
    ListRightPopLeftPush,
    ListRightPopLeftPushResponse,
    ListRightPopResponse,
    ListRightPush,
    ListRightPushResponse,
    ListSetByIndex,
    ListSetByIndexResponse,
    ListTrim,
    ListTrimResponse,
)
from django_kvcommands.commands.server import (
    CacheDataItem,
    CacheDatabase,
    CachePaging,
    ClearData,
    ClearDataResponse,
    GetAllDatabases,
    GetAllDatabasesResponse,
    GetKeyDetail,
    GetKeyDetailResponse,
    GetKeys,
    GetKeysResponse,
    GetServerConfig,
    GetServerConfigResponse,
    KeyQuery,
    SaveServerConfig,
    SaveServerConfigResponse,
)
from django_kvcommands.commands.sets import (
    SetAdd,
    SetAddResponse,
    SetCombine,
    SetCombineAndStore,
    SetCombineAndStoreResponse,
    SetCombineResponse,
    SetContains,
    SetContainsResponse,
    SetLength,
    SetLengthResponse,
    SetMembers,
    SetMembersResponse,
    SetMove,
    SetMoveResponse,
    SetPop,
    SetPopResponse,
    SetRandomMember,
    SetRandomMemberResponse,
    SetRandomMembers,
    SetRandomMembersResponse,
    SetRemove,
    SetRemoveResponse,
)
from django_kvcommands.commands.sort import (
    Sort,
    SortAndStore,
    SortAndStoreResponse,
    SortResponse,
)
from django_kvcommands.commands.sorted_sets import (
    SortedSetAdd,
    SortedSetAddResponse,
    SortedSetCombineAndStore,
    SortedSetCombineAndStoreResponse,
    SortedSetDecrement,
    SortedSetDecrementResponse,
    SortedSetIncrement,
    SortedSetIncrementResponse,
    SortedSetLength,
    SortedSetLengthByValue,
    SortedSetLengthByValueResponse,
    SortedSetLengthResponse,
    SortedSetMember,
    SortedSetRangeByRank,
    SortedSetRangeByRankResponse,
    SortedSetRangeByRankWithScores,
    SortedSetRangeByRankWithScoresResponse,
    SortedSetRangeByScore,
    SortedSetRangeByScoreResponse,
    SortedSetRangeByScoreWithScores,
    SortedSetRangeByScoreWithScoresResponse,
    SortedSetRangeByValue,
    SortedSetRangeByValueResponse,
    SortedSetRank,
    SortedSetRankResponse,
    SortedSetRemove,
    SortedSetRemoveRangeByRank,
    SortedSetRemoveRangeByRankResponse,
    SortedSetRemoveRangeByScore,
    SortedSetRemoveRangeByScoreResponse,
    SortedSetRemoveRangeByValue,
    SortedSetRemoveRangeByValueResponse,
    SortedSetRemoveResponse,
    SortedSetScore,
    SortedSetScoreResponse,
)
from django_kvcommands.commands.strings import (
    StringAppend,
    StringAppendResponse,
    StringBitCount,
    StringBitCountResponse,
    StringBitOperation,
    StringBitOperationResponse,
    StringBitPosition,
    StringBitPositionResponse,
    StringDecrement,
    StringDecrementResponse,
    StringEntry,
    StringGet,
    StringGetBit,
    StringGetBitResponse,
    StringGetRange,
    StringGetRangeResponse,
    StringGetResponse,
    StringGetSet,
    StringGetSetResponse,
    StringGetWithExpiry,
    StringGetWithExpiryResponse,
    StringIncrement,
    StringIncrementResponse,
    StringLength,
    StringLengthResponse,
    StringSet,
    StringSetBit,
    StringSetBitResponse,
    StringSetItem,
    StringSetRange,
    StringSetRangeResponse,
    StringSetResponse,
    StringSetResult,
)

__all__ = [
    "CacheDataItem",
    "CacheDatabase",
    "CachePaging",
    "ClearData",
    "ClearDataResponse",
    "Command",
    "GetAllDatabases",
    "GetAllDatabasesResponse",
    "GetKeyDetail",
    "GetKeyDetailResponse",
    "GetKeys",
    "GetKeysResponse",
    "GetServerConfig",
    "GetServerConfigResponse",
    "HashDecrement",
    "HashDecrementResponse",
    "HashDelete",
    "HashDeleteResponse",
    "HashExists",
    "HashExistsResponse",
    "HashGet",
    "HashGetAll",
    "HashGetAllResponse",
    "HashGetResponse",
    "HashIncrement",
    "HashIncrementResponse",
    "HashKeys",
    "HashKeysResponse",
    "HashLength",
    "HashLengthResponse",
    "HashScan",
    "HashScanResponse",
    "HashSet",
    "HashSetResponse",
    "HashValues",
    "HashValuesResponse",
    "KeyCommand",
    "KeyDelete",
    "KeyDeleteResponse",
    "KeyDump",
    "KeyDumpResponse",
    "KeyExists",
    "KeyExistsResponse",
    "KeyExpire",
    "KeyExpireResponse",
    "KeyGetType",
    "KeyGetTypeResponse",
    "KeyMigrate",
    "KeyMigrateResponse",
    "KeyMove",
    "KeyMoveResponse",
    "KeyPersist",
    "KeyPersistResponse",
    "KeyQuery",
    "KeyRandom",
    "KeyRandomResponse",
    "KeyRename",
    "KeyRenameResponse",
    "KeyRestore",
    "KeyRestoreResponse",
    "KeyTimeToLive",
    "KeyTimeToLiveResponse",
    "ListGetByIndex",
    "ListGetByIndexResponse",
    "ListInsertAfter",
    "ListInsertAfterResponse",
    "ListInsertBefore",
    "ListInsertBeforeResponse",
    "ListLeftPop",
    "ListLeftPopResponse",
    "ListLeftPush",
    "ListLeftPushResponse",
    "ListLength",
    "ListLengthResponse",
    "ListRange",
    "ListRangeResponse",
    "ListRemove",
    "ListRemoveResponse",
    "ListRightPop",
    "ListRightPopLeftPush",
    "ListRightPopLeftPushResponse",
    "ListRightPopResponse",
    "ListRightPush",
    "ListRightPushResponse",
    "ListSetByIndex",
    "ListSetByIndexResponse",
    "ListTrim",
    "ListTrimResponse",
    "Response",
    "SaveServerConfig",
    "SaveServerConfigResponse",
    "SetAdd",
    "SetAddResponse",
    "SetCombine",
    "SetCombineAndStore",
    "SetCombineAndStoreResponse",
    "SetCombineResponse",
    "SetContains",
    "SetContainsResponse",
    "SetLength",
    "SetLengthResponse",
    "SetMembers",
    "SetMembersResponse",
    "SetMove",
    "SetMoveResponse",
    "SetPop",
    "SetPopResponse",
    "SetRandomMember",
    "SetRandomMemberResponse",
    "SetRandomMembers",
    "SetRandomMembersResponse",
    "SetRemove",
    "SetRemoveResponse",
    "Sort",
    "SortAndStore",
    "SortAndStoreResponse",
    "SortResponse",
    "SortedSetAdd",
    "SortedSetAddResponse",
    "SortedSetCombineAndStore",
    "SortedSetCombineAndStoreResponse",
    "SortedSetDecrement",
    "SortedSetDecrementResponse",
    "SortedSetIncrement",
    "SortedSetIncrementResponse",
    "SortedSetLength",
    "SortedSetLengthByValue",
    "SortedSetLengthByValueResponse",
    "SortedSetLengthResponse",
    "SortedSetMember",
    "SortedSetRangeByRank",
    "SortedSetRangeByRankResponse",
    "SortedSetRangeByRankWithScores",
    "SortedSetRangeByRankWithScoresResponse",
    "SortedSetRangeByScore",
    "SortedSetRangeByScoreResponse",
    "SortedSetRangeByScoreWithScores",
    "SortedSetRangeByScoreWithScoresResponse",
    "SortedSetRangeByValue",
    "SortedSetRangeByValueResponse",
    "SortedSetRank",
    "SortedSetRankResponse",
    "SortedSetRemove",
    "SortedSetRemoveRangeByRank",
    "SortedSetRemoveRangeByRankResponse",
    "SortedSetRemoveRangeByScore",
    "SortedSetRemoveRangeByScoreResponse",
    "SortedSetRemoveRangeByValue",
    "SortedSetRemoveRangeByValueResponse",
    "SortedSetRemoveResponse",
    "SortedSetScore",
    "SortedSetScoreResponse",
    "StringAppend",
    "StringAppendResponse",
    "StringBitCount",
    "StringBitCountResponse",
    "StringBitOperation",
    "StringBitOperationResponse",
    "StringBitPosition",
    "StringBitPositionResponse",
    "StringDecrement",
    "StringDecrementResponse",
    "StringEntry",
    "StringGet",
    "StringGetBit",
    "StringGetBitResponse",
    "StringGetRange",
    "StringGetRangeResponse",
    "StringGetResponse",
    "StringGetSet",
    "StringGetSetResponse",
    "StringGetWithExpiry",
    "StringGetWithExpiryResponse",
    "StringIncrement",
    "StringIncrementResponse",
    "StringLength",
    "StringLengthResponse",
    "StringSet",
    "StringSetBit",
    "StringSetBitResponse",
    "StringSetItem",
    "StringSetRange",
    "StringSetRangeResponse",
    "StringSetResponse",
    "StringSetResult",
]
