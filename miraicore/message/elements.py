"""Message elements and the helpers that build them."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, Optional

from miraicore.message.face import FACE_MAP, UNKNOWN_FACE_NAME


class ElementType(IntEnum):
    TEXT = 0
    IMAGE = 1
    FACE = 2
    AT = 3
    REPLY = 4
    SERVICE = 5
    FORWARD = 6
    FILE = 7
    VOICE = 8
    VIDEO = 9
    LIGHT_APP = 10
    RED_BAG = 11


class RedBagMessageType(IntEnum):
    SIMPLE = 2
    LUCKY = 3
    SIMPLE_THEME = 4
    LUCKY_THEME = 5
    WORD = 6
    SIMPLE_SPECIFY = 7
    LUCKY_SPECIFY = 8
    SIMPLE_SPECIFY_OVER3 = 11
    LUCKY_SPECIFY_OVER3 = 12
    VOICE = 13
    LOOK = 14
    VOICE_C2C = 15
    H5 = 17
    K_SONG = 18
    EMOJI = 19
    H5_COMMON = 20
    DRAW = 22
    WORD_CHAIN = 24
    KEYWORD = 25
    DRAW_MULTI_MODEL = 26


class AtType(IntEnum):
    GROUP_MEMBER = 0
    GUILD_MEMBER = 1
    GUILD_CHANNEL = 2


class ImageBizType(IntEnum):
    UNKNOWN = 0
    CUSTOM_FACE = 1
    HOT = 2
    DOU = 3
    ZHI_TU = 4
    STICKER = 7
    SELFIE = 8
    STICKER_AD = 9
    RELATED_EMO = 10
    HOT_SEARCH = 13


@dataclass
class TextElement:
    content: str
    type: ClassVar[ElementType] = ElementType.TEXT


@dataclass
class VoiceElement:
    name: str = ""
    md5: bytes = b""
    size: int = 0
    url: str = ""
    data: bytes = b""
    type: ClassVar[ElementType] = ElementType.VOICE


@dataclass
class GroupVoiceElement:
    data: bytes = b""
    ptt: Any = None
    type: ClassVar[ElementType] = ElementType.VOICE


PrivateVoiceElement = GroupVoiceElement


@dataclass
class FaceElement:
    index: int
    name: str = ""
    type: ClassVar[ElementType] = ElementType.FACE


@dataclass
class AtElement:
    target: int
    display: str = ""
    sub_type: AtType = AtType.GROUP_MEMBER
    type: ClassVar[ElementType] = ElementType.AT


@dataclass
class GroupFileElement:
    name: str = ""
    size: int = 0
    path: str = ""
    busid: int = 0
    type: ClassVar[ElementType] = ElementType.FILE


@dataclass
class ReplyElement:
    reply_seq: int = 0
    sender: int = 0
    group_id: int = 0
    time: int = 0
    elements: list = field(default_factory=list)
    type: ClassVar[ElementType] = ElementType.REPLY


@dataclass
class ShortVideoElement:
    name: str = ""
    uuid: bytes = b""
    size: int = 0
    thumb_size: int = 0
    md5: bytes = b""
    thumb_md5: bytes = b""
    url: str = ""
    guild: bool = False
    type: ClassVar[ElementType] = ElementType.VIDEO


@dataclass
class ServiceElement:
    id: int = 0
    content: str = ""
    res_id: str = ""
    sub_type: str = ""
    type: ClassVar[ElementType] = ElementType.SERVICE


@dataclass
class LightAppElement:
    content: str = ""
    type: ClassVar[ElementType] = ElementType.LIGHT_APP


@dataclass
class RedBagElement:
    msg_type: RedBagMessageType
    title: str = ""
    type: ClassVar[ElementType] = ElementType.RED_BAG


@dataclass
class MusicShareElement:
    """Music share card; music_type takes a MusicType value."""

    music_type: int = 0
    title: str = ""
    brief: str = ""
    summary: str = ""
    url: str = ""
    picture_url: str = ""
    music_url: str = ""
    type: ClassVar[ElementType] = ElementType.LIGHT_APP


@dataclass
class AnimatedSticker:
    id: int = 0
    name: str = ""
    type: ClassVar[ElementType] = ElementType.FACE


@dataclass
class GroupImageElement:
    image_id: str = ""
    file_id: int = 0
    image_type: int = 0
    image_biz_type: ImageBizType = ImageBizType.UNKNOWN
    size: int = 0
    width: int = 0
    height: int = 0
    md5: bytes = b""
    url: str = ""
    effect_id: int = 0
    flash: bool = False
    type: ClassVar[ElementType] = ElementType.IMAGE


@dataclass
class FriendImageElement:
    image_id: str = ""
    md5: bytes = b""
    size: int = 0
    url: str = ""
    flash: bool = False
    type: ClassVar[ElementType] = ElementType.IMAGE


@dataclass
class GuildImageElement:
    file_id: int = 0
    file_path: str = ""
    image_type: int = 0
    size: int = 0
    width: int = 0
    height: int = 0
    download_index: str = ""
    md5: bytes = b""
    url: str = ""
    type: ClassVar[ElementType] = ElementType.IMAGE


@dataclass
class MarketFaceElement:
    name: str = ""
    face_id: bytes = b""
    tab_id: int = 0
    item_type: int = 0
    sub_type: int = 0  # 0 none, 1 magic face, 2 gif, 3 png
    media_type: int = 0  # 1 voice face, 2 dynamic face
    encrypt_key: bytes = b""
    magic_value: str = ""
    type: ClassVar[ElementType] = ElementType.FACE


@dataclass
class DiceElement:
    market_face: MarketFaceElement
    value: int
    type: ClassVar[ElementType] = ElementType.FACE


@dataclass
class FingerGuessingElement:
    market_face: MarketFaceElement
    value: int
    name: str = ""
    type: ClassVar[ElementType] = ElementType.FACE


@dataclass
class ForwardElement:
    file_name: str = ""
    content: str = ""
    res_id: str = ""
    items: list = field(default_factory=list)
    type: ClassVar[ElementType] = ElementType.FORWARD


FINGER_GUESSING_NAMES: dict[int, str] = {0: "石头", 1: "剪刀", 2: "布"}

_GROUP_IMAGE_URL = "https://gchat.qpic.cn/gchatpic_new/1/0-0-{}/0?term=2"
_URL_SHARE_TEMPLATE = (
    '<?xml version="1.0" encoding="utf-8"?><msg templateID="12345" action="web" '
    'brief="[分享] {title}" serviceID="1" url="{url}"><item layout="2">'
    '<picture cover="{image}"/><title>{title}</title><summary>{content}</summary>'
    "</item><source/></msg>"
)


def new_text(s: str) -> TextElement:
    return TextElement(content=s)


def new_face(index: int) -> FaceElement:
    """Face element named from the built-in face table."""
    return FaceElement(index=index, name=FACE_MAP.get(index) or UNKNOWN_FACE_NAME)


def new_at(target: int, display: Optional[str] = None) -> AtElement:
    """Mention of target; target 0 mentions everyone."""
    if display is None:
        display = "@全体成员" if target == 0 else f"@{target}"
    return AtElement(target=target, display=display)


def at_all() -> AtElement:
    return new_at(0)


def new_reply(m: Any) -> ReplyElement:
    """Reply to a group message."""
    return ReplyElement(
        reply_seq=m.id, sender=m.sender.uin, time=m.time, elements=m.elements
    )


def new_private_reply(m: Any) -> ReplyElement:
    """Reply to a private message."""
    return ReplyElement(
        reply_seq=m.id, sender=m.sender.uin, time=m.time, elements=m.elements
    )


def new_url_share(url: str, title: str, content: str, image: str) -> ServiceElement:
    template = _URL_SHARE_TEMPLATE.format(url=url, title=title, content=content, image=image)
    return ServiceElement(id=1, content=template, res_id=url, sub_type="UrlShare")


def new_rich_xml(template: str, res_id: int = 0) -> ServiceElement:
    """XML rich message; a res_id of 0 means the default of 60."""
    if res_id == 0:
        res_id = 60
    return ServiceElement(id=res_id, content=template, sub_type="xml")


def new_rich_json(template: str) -> ServiceElement:
    return ServiceElement(id=1, content=template, sub_type="json")


def new_light_app(content: str) -> LightAppElement:
    return LightAppElement(content=content)


def new_group_image(
    image_id: str,
    md5: bytes,
    file_id: int,
    size: int,
    width: int,
    height: int,
    image_type: int,
) -> GroupImageElement:
    return GroupImageElement(
        image_id=image_id,
        file_id=file_id,
        md5=md5,
        size=size,
        image_type=image_type,
        width=width,
        height=height,
        url=_GROUP_IMAGE_URL.format(bytes(md5).hex().upper()),
    )


def new_dice(value: int) -> MarketFaceElement:
    """Dice face showing value, 1 to 6."""
    if not 1 <= value <= 6:
        raise ValueError(f"dice value must be between 1 and 6, got {value}")
    return MarketFaceElement(
        name="[骰子]",
        face_id=bytes([72, 35, 211, 173, 177, 93, 240, 128, 20, 206, 93, 103, 150, 183, 110, 225]),
        tab_id=11464,
        item_type=6,
        sub_type=3,
        media_type=0,
        encrypt_key=bytes([52, 48, 57, 101, 50, 97, 54, 57, 98, 49, 54, 57, 49, 56, 102, 57]),
        magic_value=f"rscType?1;value={value - 1}",
    )


def new_finger_guessing(value: int) -> MarketFaceElement:
    """Rock-paper-scissors face: 0 rock, 1 scissors, 2 paper."""
    if not 0 <= value <= 2:
        raise ValueError(f"finger guessing value must be between 0 and 2, got {value}")
    return MarketFaceElement(
        name="[猜拳]",
        face_id=bytes([131, 200, 162, 147, 174, 101, 202, 20, 15, 52, 129, 32, 167, 116, 72, 238]),
        tab_id=11415,
        item_type=6,
        sub_type=3,
        media_type=0,
        encrypt_key=bytes([55, 100, 101, 51, 57, 102, 101, 98, 99, 102, 52, 53, 101, 54, 100, 98]),
        magic_value=f"rscType?1;value={value}",
    )