"""Rich content elements of guild topic feeds and their JSON forms."""

from dataclasses import dataclass
from typing import Any, Protocol

Content = dict[str, Any]


class FeedRichContent(Protocol):
    def pack(self, pattern_id: str, is_pattern_data: bool) -> Content: ...


@dataclass
class TextElement:
    content: str = ""

    def pack(self, pattern_id: str, is_pattern_data: bool) -> Content:
        if is_pattern_data:
            return {"type": 1, "style": "n", "text": self.content, "children": []}
        return {"type": 1, "text_content": {"text": self.content}}


@dataclass
class EmojiElement:
    index: int = 0
    id: str = ""
    name: str = ""

    def pack(self, pattern_id: str, is_pattern_data: bool) -> Content:
        if is_pattern_data:
            return {"type": 2, "id": pattern_id, "emojiType": "1", "emojiId": self.id}
        return {
            "type": 4,
            "pattern_id": pattern_id,
            "emoji_content": {"type": "1", "id": self.id},
        }


@dataclass
class AtElement:
    id: str = ""
    tiny_id: int = 0
    nickname: str = ""

    def pack(self, pattern_id: str, is_pattern_data: bool) -> Content:
        if is_pattern_data:
            return {
                "type": 3,
                "id": pattern_id,
                "user": {"id": str(self.tiny_id), "nick": self.nickname},
            }
        return {
            "type": 2,
            "pattern_id": pattern_id,
            "at_content": {"type": 1, "user": {"id": self.id, "nick": self.nickname}},
        }


@dataclass
class ChannelQuoteElement:
    guild_id: int = 0
    channel_id: int = 0
    display_text: str = ""

    def pack(self, pattern_id: str, is_pattern_data: bool) -> Content:
        if is_pattern_data:
            return {
                "type": 4,
                "id": pattern_id,
                "guild_info": {
                    "channel_id": str(self.channel_id),
                    "name": self.display_text,
                },
            }
        return {
            "type": 5,
            "pattern_id": pattern_id,
            "channel_content": {
                "channel_info": {
                    "name": self.display_text,
                    "sign": {
                        "guild_id": str(self.guild_id),
                        "channel_id": str(self.channel_id),
                    },
                }
            },
        }


@dataclass
class UrlQuoteElement:
    url: str = ""
    display_text: str = ""

    def pack(self, pattern_id: str, is_pattern_data: bool) -> Content:
        if is_pattern_data:
            return {"type": 5, "desc": self.display_text, "href": self.url, "id": pattern_id}
        return {
            "type": 3,
            "pattern_id": pattern_id,
            "url_content": {"url": self.url, "displayText": self.display_text},
        }