"""
Page markers

Visibility rules embedded in a page title or text:

    %Show(MFT-2000 + MFT-2000A + MFT-5000)%    show if ANY listed model is enabled
    %Show(MFT-2000, MFT-5000)%                 same, comma-separated
    %Hide(MFT-2000)%  /  %Hide (MFT-2000)%     hide if a listed model is enabled

Hide markers take precedence over Show markers. A page without markers, or
a request without models, is shown. Markers are removed from the text that
is finally displayed.
"""

import re
from typing import Iterable, List, Optional

from ..models.directives import (
    Condition,
    Directive,
    ModelCondition,
    AnyCondition,
    AllCondition,
    NotCondition,
)
from .evaluator import ConditionEvaluator, directive_evaluate
from .log import LOG


SHOW_PATTERN = re.compile(r'%Show\(([^)]+)\)%', re.IGNORECASE)
HIDE_PATTERN = re.compile(r'%Hide\s*\(([^)]+)\)%', re.IGNORECASE)
MODEL_SEPARATOR = re.compile(r'[+,]')


def extract_show_markers(text: str) -> List[str]:
    """
    Extract Show marker bodies in order of appearance

    Example:
        >>> extract_show_markers("Setup %Show(MFT-2000 + MFT-5000)%")
        ['MFT-2000 + MFT-5000']
    """
    return [body.strip() for body in SHOW_PATTERN.findall(text or '')]


def extract_hide_markers(text: str) -> List[str]:
    """Extract Hide marker bodies in order of appearance"""
    return [body.strip() for body in HIDE_PATTERN.findall(text or '')]


def markerGroup_parse(marker_body: str) -> AnyCondition:
    """Parse "A + B, C" into an OR over its model identifiers"""
    return AnyCondition(tuple(
        ModelCondition(token)
        for token in MODEL_SEPARATOR.split(marker_body)
        if token.strip()
    ))


def matches_models(marker_body: str, enabled: Iterable[str]) -> bool:
    """
    Check whether ANY model listed in a marker is enabled

    '+' and ',' separators may be mixed. Without enabled models every
    marker matches.
    """
    evaluator = ConditionEvaluator(enabled)
    if not evaluator.enabled:
        return True
    return evaluator.evaluate(markerGroup_parse(marker_body))


def parse_marker_directive(text: Optional[str]) -> Directive:
    """
    Parse the markers of a page title into a Directive

    The resulting condition is "no Hide group matches AND some Show group
    matches", with either half left out when its markers are absent.
    """
    hide_markers = extract_hide_markers(text or '')
    show_markers = extract_show_markers(text or '')
    if not hide_markers and not show_markers:
        return Directive.none()

    parts: List[Condition] = []
    if hide_markers:
        parts.append(NotCondition(AnyCondition(tuple(markerGroup_parse(body) for body in hide_markers))))
    if show_markers:
        parts.append(AnyCondition(tuple(markerGroup_parse(body) for body in show_markers)))

    condition = parts[0] if len(parts) == 1 else AllCondition(tuple(parts))
    return Directive.show_if(condition, source=text or '')


def should_show_page(document_title: Optional[str], enabled: Iterable[str]) -> bool:
    """
    Decide whether a page is shown

    Args:
        document_title: Page title carrying the markers; None is shown
        enabled: Enabled model identifiers; empty means no filter

    Returns:
        False if a Hide marker matches, or if Show markers exist and none
        matches; True otherwise
    """
    if not document_title:
        return True

    enabled = list(enabled)
    result = directive_evaluate(parse_marker_directive(document_title), enabled)
    LOG(f"Page {document_title!r} with {enabled} -> {'show' if result else 'hide'}", level=2)
    return result


def remove_markers(text: str) -> str:
    """
    Remove every Show/Hide marker and strip the result

    Repeats until nothing is left to remove, so the result never contains
    a marker.

    Example:
        >>> remove_markers("Quick start %Show(MFT-2000)%")
        'Quick start'
    """
    previous = None
    while text != previous:
        previous = text
        text = HIDE_PATTERN.sub('', SHOW_PATTERN.sub('', text))
    return text.strip()


def process_text_content(text: str) -> str:
    """Display text for a title or block once its markers were evaluated"""
    return remove_markers(text)
