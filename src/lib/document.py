"""
Document filter

Applies page markers and toggle directives to a page tree: hidden pages
are dropped, hidden toggles are dropped together with their content, and
markers are stripped from the remaining text.
"""

import yaml
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from ..config import appsettings
from ..models.document import Page, ContentBlock, BlockDecision
from .log import LOG
from .markers import should_show_page, process_text_content
from .toggles import should_show_toggle


class DocumentError(Exception):
    """Raised when a page document cannot be read or written"""
    pass


class DocumentFilter:
    """
    Filters page trees for one set of enabled models

    Responsibilities:
    - Page-level decision from %Show()%/%Hide()% markers in the title
    - Toggle-level decisions from `bullet:hide` and {% if ... %} headings
    - Marker cleanup of displayed text
    - Recording every decision for reporting

    Example:
        >>> page = Page(id="p", title="Guide %Hide(MFT-2000)%")
        >>> DocumentFilter(["MFT-2000"]).page_filter(page) is None
        True
    """

    def __init__(self, enabled: Iterable[str], strip_markers: Optional[bool] = None) -> None:
        """
        Args:
            enabled: Enabled model identifiers (already normalized)
            strip_markers: Remove markers from kept text
                           (default: MODELGATE_STRIP_MARKERS)
        """
        self.enabled: List[str] = list(enabled)
        self.strip_markers = appsettings.strip_markers if strip_markers is None else strip_markers
        self.decisions: List[BlockDecision] = []

    def page_filter(self, page: Page) -> Optional[Page]:
        """
        Filter a page

        Returns:
            A new filtered Page, or None if the page itself is hidden
        """
        shown = should_show_page(page.title, self.enabled)
        self.decisions.append(BlockDecision(page.id, "page", shown, page.title))
        if not shown:
            LOG(f"Page {page.id} hidden", level=2)
            return None

        return Page(
            id=page.id,
            title=self.text_clean(page.title),
            blocks=self.blocks_filter(page.blocks),
        )

    def blocks_filter(self, blocks: List[ContentBlock]) -> List[ContentBlock]:
        """Filter a list of sibling blocks recursively"""
        kept: List[ContentBlock] = []
        for block in blocks:
            if block.is_toggle:
                shown = should_show_toggle(block.text, self.enabled)
                self.decisions.append(BlockDecision(block.id, "toggle", shown, block.text))
                if not shown:
                    LOG(f"Toggle {block.id} hidden with {len(block.children)} child block(s)", level=2)
                    continue

            kept.append(ContentBlock(
                id=block.id,
                type=block.type,
                text=self.text_clean(block.text),
                children=self.blocks_filter(block.children),
            ))
        return kept

    def text_clean(self, text: str) -> str:
        return process_text_content(text) if self.strip_markers else text

    def hiddenCount_get(self) -> int:
        """Number of content units hidden so far"""
        return sum(1 for decision in self.decisions if not decision.shown)


def document_load(path: Union[str, Path]) -> Page:
    """
    Load a page document (YAML, or JSON which YAML accepts)

    Raises:
        DocumentError: If the file cannot be read or is not a page mapping
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DocumentError(f"Failed to parse {path.name}: {e}")
    except OSError as e:
        raise DocumentError(f"Failed to load {path.name}: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DocumentError(f"{path.name}: expected a mapping with 'title' and 'blocks'")
    try:
        return Page.from_dict(data)
    except (AttributeError, TypeError) as e:
        raise DocumentError(f"{path.name}: malformed block list: {e}")


def document_save(page: Page, path: Union[str, Path]) -> Path:
    """Write a page as YAML, returning the written path"""
    path = Path(path)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(page.to_dict(), f, sort_keys=False, allow_unicode=True)
    except OSError as e:
        raise DocumentError(f"Failed to write {path}: {e}")
    return path
