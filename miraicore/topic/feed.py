"""Guild topic feeds and the JSON payload used to post them."""

import itertools
import json
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Optional

from miraicore.topic.rich_elements import TextElement
from miraicore.utils.strings import random_string_range

_block_counter = itertools.count(1)
_block_lock = threading.Lock()

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class FeedPoster:
    tiny_id: int = 0
    tiny_id_str: str = ""
    nickname: str = ""
    icon_url: str = ""


@dataclass
class FeedImageInfo:
    file_id: str = ""
    pattern_id: str = ""
    url: str = ""
    width: int = 0
    height: int = 0


@dataclass
class FeedVideoInfo:
    file_id: str = ""
    pattern_id: str = ""
    url: str = ""
    width: int = 0
    height: int = 0


def gen_block_id() -> str:
    """Unique block id: milliseconds, four random digits and a counter."""
    with _block_lock:
        counter = next(_block_counter)
    millis = time.time_ns() // 1_000_000
    return f"{millis}_{random_string_range(4, '0123456789')}_{counter}"


def _to_json(value: Any) -> str:
    text = json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return "".join(_HTML_ESCAPES.get(char, char) for char in text)


def _pattern_id(self_uin: int) -> str:
    stamp = time.strftime("%Y_%m_%d_%H_%M_%S")
    suffix = random_string_range(16, "0123456789abcdef")
    return f"o{self_uin}_{stamp}_{suffix}"


@dataclass
class Feed:
    id: str = ""
    title: str = ""
    sub_title: str = ""
    create_time: int = 0
    poster: Optional[FeedPoster] = None
    guild_id: int = 0
    channel_id: int = 0
    images: list = field(default_factory=list)
    videos: list = field(default_factory=list)
    contents: list = field(default_factory=list)

    def to_sending_payload(self, self_uin: int) -> str:
        """JSON payload for publishing this feed as self_uin."""
        if self.poster is None:
            raise ValueError("feed has no poster")
        title = TextElement(content=self.title)
        pattern_ids = [_pattern_id(self_uin) for _ in self.contents]
        contents = [c.pack(pid, False) for c, pid in zip(self.contents, pattern_ids)]
        pattern_data = [c.pack(pid, True) for c, pid in zip(self.contents, pattern_ids)]
        pattern_info = [
            {"id": gen_block_id(), "type": "blockParagraph", "data": [title.pack("", True)]},
            {"id": gen_block_id(), "type": "blockParagraph", "data": pattern_data},
        ]
        payload = {
            "images": [],
            "videos": [],
            "poster": {"id": self.poster.tiny_id_str, "nick": self.poster.nickname},
            "channelInfo": {
                "sign": {
                    "guild_id": str(self.guild_id),
                    "channel_id": str(self.channel_id),
                }
            },
            "title": {"contents": [title.pack("", False)]},
            "contents": {"contents": contents},
            "patternInfo": _to_json(pattern_info),
        }
        return _to_json(payload)