"""Messages, senders and the splitting of long outgoing messages."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Iterable, Optional

from miraicore.message.elements import (
    AtElement,
    FaceElement,
    ForwardElement,
    FriendImageElement,
    GroupImageElement,
    MarketFaceElement,
    RedBagElement,
    ReplyElement,
    TextElement,
    new_text,
)
from miraicore.utils.strings import chunk_string

MAX_MESSAGE_SIZE = 5000
"""Estimated size limit of one outgoing message."""

_ANONYMOUS_UIN = 80000000
_FRAGMENT_CHARS = 80
_REPLY_OVERHEAD = 444
_IMAGE_SIZE = 100


class MusicType(IntEnum):
    QQ_MUSIC = 0
    CLOUD_MUSIC = 1
    MIGU_MUSIC = 2
    KUGOU_MUSIC = 3
    KUWO_MUSIC = 4


@dataclass
class AnonymousInfo:
    anonymous_id: str = ""
    anonymous_nick: str = ""


@dataclass
class Sender:
    uin: int = 0
    nickname: str = ""
    card_name: str = ""
    anonymous_info: Optional[AnonymousInfo] = None
    is_friend: bool = False

    def is_anonymous(self) -> bool:
        return self.uin == _ANONYMOUS_UIN

    def display_name(self) -> str:
        """Group card name if set, otherwise the nickname."""
        return self.card_name or self.nickname


def _simple_string(elements: Iterable[Any]) -> str:
    parts = []
    for elem in elements:
        if isinstance(elem, TextElement):
            parts.append(elem.content)
        elif isinstance(elem, FaceElement):
            parts.append(f"[{elem.name}]")
        elif isinstance(elem, AtElement):
            parts.append(elem.display)
    return "".join(parts)


@dataclass
class PrivateMessage:
    id: int = 0
    internal_id: int = 0
    time: int = 0
    sender: Optional[Sender] = None
    elements: list = field(default_factory=list)
    self_id: int = 0
    target: int = 0

    def to_string(self) -> str:
        return _simple_string(self.elements)


@dataclass
class TempMessage:
    id: int = 0
    sender: Optional[Sender] = None
    elements: list = field(default_factory=list)
    group_code: int = 0
    group_name: str = ""
    self_id: int = 0

    def to_string(self) -> str:
        return _simple_string(self.elements)


@dataclass
class GroupMessage:
    id: int = 0
    internal_id: int = 0
    time: int = 0
    sender: Optional[Sender] = None
    elements: list = field(default_factory=list)
    original_object: Any = None
    group_code: int = 0
    group_name: str = ""

    def to_string(self) -> str:
        parts = []
        for elem in self.elements:
            if isinstance(elem, TextElement):
                parts.append(elem.content)
            elif isinstance(elem, (FaceElement, MarketFaceElement)):
                parts.append(f"[{elem.name}]")
            elif isinstance(elem, GroupImageElement):
                parts.append(f"[Image: {elem.image_id}]")
            elif isinstance(elem, AtElement):
                parts.append(elem.display)
            elif isinstance(elem, RedBagElement):
                parts.append(f"[RedBag:{elem.title}]")
            elif isinstance(elem, ReplyElement):
                parts.append(f"[Reply:{elem.reply_seq}]")
        return "".join(parts)


@dataclass
class SendingMessage:
    elements: list = field(default_factory=list)

    def append(self, element: Any) -> "SendingMessage":
        """Add element unless it is None; returns self for chaining."""
        if element is not None:
            self.elements.append(element)
        return self

    def any(self, predicate: Callable[[Any], bool]) -> bool:
        return any(predicate(e) for e in self.elements)

    def first_or_none(self, predicate: Callable[[Any], bool]) -> Optional[Any]:
        return next((e for e in self.elements if predicate(e)), None)

    def count(self, predicate: Callable[[Any], bool]) -> int:
        return sum(1 for e in self.elements if predicate(e))

    def to_fragmented(self) -> list[list[Any]]:
        """One element per fragment, text cut into pieces of 80 characters."""
        fragments: list[list[Any]] = []
        for elem in self.elements:
            if isinstance(elem, TextElement):
                fragments.extend(
                    [new_text(piece)] for piece in chunk_string(elem.content, _FRAGMENT_CHARS)
                )
            else:
                fragments.append([elem])
        return fragments


@dataclass
class GuildSender:
    tiny_id: int = 0
    nickname: str = ""


@dataclass
class GuildMessageEmojiReaction:
    emoji_id: str = ""
    emoji_type: int = 0
    face: Optional[FaceElement] = None
    count: int = 0
    clicked: bool = False


@dataclass
class GuildChannelMessage:
    id: int = 0
    internal_id: int = 0
    guild_id: int = 0
    channel_id: int = 0
    time: int = 0
    sender: Optional[GuildSender] = None
    elements: list = field(default_factory=list)
    reactions: list = field(default_factory=list)  # only filled for pulled messages


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def to_readable_string(elements: Iterable[Any]) -> str:
    """Plain-text rendering of elements as shown in previews."""
    parts = []
    for elem in elements:
        if isinstance(elem, TextElement):
            parts.append(elem.content)
        elif isinstance(elem, (GroupImageElement, FriendImageElement)):
            parts.append("[图片]")
        elif isinstance(elem, FaceElement):
            parts.append("/" + elem.name)
        elif isinstance(elem, ForwardElement):
            parts.append("[聊天记录]")
        elif isinstance(elem, AtElement):
            parts.append(elem.display)
    return "".join(parts)


def estimate_length(elements: Iterable[Any]) -> int:
    """Rough size in bytes that elements take in a sent message."""
    total = 0
    for elem in elements:
        if isinstance(elem, TextElement):
            total += _byte_len(elem.content)
        elif isinstance(elem, AtElement):
            total += _byte_len(elem.display)
        elif isinstance(elem, ReplyElement):
            total += _REPLY_OVERHEAD + estimate_length(elem.elements)
        elif isinstance(elem, (GroupImageElement, FriendImageElement)):
            total += _IMAGE_SIZE
        else:
            total += _byte_len(to_readable_string([elem]))
    return total


def _merge_continuous_text(elements: list) -> list:
    merged: list = []
    buffer: list[str] = []
    for elem in elements:
        if isinstance(elem, TextElement):
            buffer.append(elem.content)
            continue
        if buffer:
            merged.append(new_text("".join(buffer)))
            buffer = []
        merged.append(elem)
    if buffer:
        merged.append(new_text("".join(buffer)))
    return merged


def _split_plain_text(content: str) -> list[TextElement]:
    """Cut content at character boundaries into pieces of at most the size limit in bytes."""
    if _byte_len(content) <= MAX_MESSAGE_SIZE:
        return [new_text(content)]
    pieces = []
    current: list[str] = []
    size = 0
    for char in content:
        width = _byte_len(char)
        if size + width > MAX_MESSAGE_SIZE:
            pieces.append(new_text("".join(current)))
            current, size = [], 0
        current.append(char)
        size += width
    if current:
        pieces.append(new_text("".join(current)))
    return pieces


def _split_elements(elements: list) -> list:
    result: list = []
    for elem in elements:
        if isinstance(elem, TextElement):
            result.extend(_split_plain_text(elem.content))
        elif elem is not None:
            result.append(elem)
    return result


def split_long_message(sending_message: SendingMessage) -> list[SendingMessage]:
    """Split a message into several, each within the estimated size limit."""
    elements = _split_elements(_merge_continuous_text(sending_message.elements))
    messages: list[SendingMessage] = []
    part = SendingMessage()
    size = 0
    for elem in elements:
        estimate = estimate_length([elem])
        if size + estimate > MAX_MESSAGE_SIZE and part.elements:
            messages.append(part)
            part, size = SendingMessage(), 0
        part.append(elem)
        size += estimate
    if part.elements:
        messages.append(part)
    return messages