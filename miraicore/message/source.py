"""Where a message comes from."""

from dataclasses import dataclass
from enum import IntEnum

_NAMES = {}


class SourceType(IntEnum):
    PRIVATE = 1 << 0
    GROUP = 1 << 1
    GUILD_CHANNEL = 1 << 2
    GUILD_DIRECT = 1 << 3

    def __str__(self) -> str:
        return _NAMES.get(self, "unknown")


_NAMES.update(
    {
        SourceType.PRIVATE: "私聊",
        SourceType.GROUP: "群聊",
        SourceType.GUILD_CHANNEL: "频道",
        SourceType.GUILD_DIRECT: "频道私聊",
    }
)


@dataclass
class Source:
    """Origin of a message: group code, uin or guild id, plus channel id."""

    source_type: SourceType
    primary_id: int = 0
    secondary_id: int = 0