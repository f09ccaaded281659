"""Merged-forward messages: nodes, previews and parsing of forward cards."""

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from miraicore.message.elements import ElementType, ForwardElement
from miraicore.message.message import to_readable_string
from miraicore.utils.strings import xml_escape

_BRIEF_LIMIT = 27
_PREVIEW_NODES = 4
_PREVIEW_TITLE = '<title size="26" color="#777777">'

_RES_ID = re.compile(r'm_resid="(.*?)"')
_FILE_NAME = re.compile(r'm_fileName="(.*?)"')


@dataclass
class ForwardNode:
    """One message inside a merged forward."""

    group_id: int = 0
    sender_id: int = 0
    sender_name: str = ""
    time: int = 0
    message: list = field(default_factory=list)


@dataclass
class ForwardMessage:
    """A merged forward made of several nodes."""

    nodes: list = field(default_factory=list)
    type: ClassVar[ElementType] = ElementType.FORWARD

    def add_node(self, node: ForwardNode) -> "ForwardMessage":
        """Append node; returns self for chaining."""
        self.nodes.append(node)
        return self

    def __len__(self) -> int:
        return len(self.nodes)

    def brief(self) -> str:
        """Readable text of the leading nodes, stopping once 27 bytes are reached."""
        parts: list[str] = []
        size = 0
        for node in self.nodes:
            text = to_readable_string(node.message)
            parts.append(text)
            size += len(text.encode("utf-8"))
            if size >= _BRIEF_LIMIT:
                break
        return "".join(parts)

    def preview(self) -> str:
        """XML title lines for the first four nodes."""
        return "".join(
            f"{_PREVIEW_TITLE}{xml_escape(node.sender_name)}: "
            f"{xml_escape(to_readable_string(node.message))}</title>"
            for node in self.nodes[:_PREVIEW_NODES]
        )


def _first_group(pattern: "re.Pattern[str]", text: str) -> str:
    match = pattern.search(text)
    return match.group(1) if match else ""


def forward_msg_from_xml(xml: str) -> Optional[ForwardElement]:
    """Forward element described by a card's XML, or None if it names none."""
    res_id = _first_group(_RES_ID, xml)
    file_name = _first_group(_FILE_NAME, xml)
    if not res_id and not file_name:
        return None
    return ForwardElement(file_name=file_name, res_id=res_id)


def _is_forward(element: Any) -> bool:
    return getattr(element, "type", None) == ElementType.FORWARD