"""
Document tree models

A minimal in-memory page representation used to apply visibility rules to
exported content: a page title plus nested blocks. Toggle blocks carry their
heading in ``text`` and their body in ``children``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


TOGGLE_BLOCK = "toggle"


@dataclass
class ContentBlock:
    """
    One block of page content

    Attributes:
        id: Block identifier (free-form; used in reports)
        type: Block type, e.g. "toggle", "text", "heading"
        text: Display text; for toggles this is the heading with the directive
        children: Nested blocks (toggle body, list items, ...)
    """
    id: str
    type: str = "text"
    text: str = ""
    children: List["ContentBlock"] = field(default_factory=list)

    @property
    def is_toggle(self) -> bool:
        return self.type.lower() == TOGGLE_BLOCK

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], fallback_id: str = "") -> "ContentBlock":
        """Build a block from a plain mapping, numbering unnamed children"""
        block_id = str(data.get("id") or fallback_id)
        children = [
            cls.from_dict(child, fallback_id=f"{block_id}.{index}")
            for index, child in enumerate(data.get("children") or [])
        ]
        return cls(
            id=block_id,
            type=str(data.get("type") or "text"),
            text=str(data.get("text") or data.get("title") or ""),
            children=children,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "type": self.type, "text": self.text}
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class Page:
    """A page: title (may carry %Show()%/%Hide()% markers) and top-level blocks"""
    id: str
    title: str = ""
    blocks: List[ContentBlock] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Page":
        page_id = str(data.get("id") or "page")
        blocks = [
            ContentBlock.from_dict(block, fallback_id=f"{page_id}.{index}")
            for index, block in enumerate(data.get("blocks") or [])
        ]
        return cls(id=page_id, title=str(data.get("title") or ""), blocks=blocks)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "blocks": [block.to_dict() for block in self.blocks],
        }


@dataclass
class BlockDecision:
    """
    Visibility decision recorded for one content unit

    Attributes:
        block_id: Page or block identifier
        kind: "page" or "toggle"
        shown: Whether the unit is kept
        text: The directive-bearing text the decision was made on
    """
    block_id: str
    kind: str
    shown: bool
    text: str = ""
