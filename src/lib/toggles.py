"""
Toggle directives

Visibility rules written in a toggle block's heading (usually formatted as
inline code):

    `bullet:hide`                           hide the toggle entirely
    {% if mft-2000 %}                       show if MFT-2000 is enabled
    {% if mft-2000 or mft-5000 %}           any of them
    {% if mft-2000 and mft-5000 %}          all of them
    {% if models contains "MFT-2000" %}     legacy phrasing

`or` binds loosest: ``a or b and c`` reads as ``a or (b and c)``. There is
no grouping syntax. Anything unrecognized leaves the toggle visible.
"""

import re
from typing import Iterable, Optional

from ..config import appsettings
from ..models.directives import (
    Condition,
    Directive,
    ModelCondition,
    AnyCondition,
    AllCondition,
)
from .evaluator import ConditionEvaluator, directive_evaluate
from .log import LOG


CONDITION_PATTERN = re.compile(r'\{%\s*if\s+(.+?)\s*%\}', re.IGNORECASE)


class ConditionParser:
    """
    Parser for the body of an ``{% if ... %}`` toggle directive

    Splits on `or` first, then `and`, then resolves leaves, producing flat
    AnyCondition/AllCondition lists over ModelCondition leaves.

    Example:
        >>> str(ConditionParser().expression_parse("a or b and c"))
        '(A or (B and C))'
    """

    OR_SEPARATOR = re.compile(r'\s+or\s+', re.IGNORECASE)
    AND_SEPARATOR = re.compile(r'\s+and\s+', re.IGNORECASE)
    CONTAINS_PATTERN = re.compile(r'models\s+contains\s+["\']([^"\']+)["\']', re.IGNORECASE)

    def expression_parse(self, body: str) -> Condition:
        """
        Parse an expression body into a condition tree

        An empty body parses to an empty AllCondition, which is always true.
        """
        normalized = body.strip()
        if not normalized:
            return AllCondition()

        parts = self.OR_SEPARATOR.split(normalized)
        if len(parts) > 1:
            return AnyCondition(tuple(self.expression_parse(part) for part in parts))

        parts = self.AND_SEPARATOR.split(normalized)
        if len(parts) > 1:
            return AllCondition(tuple(self.expression_parse(part) for part in parts))

        return self.leaf_parse(normalized)

    def leaf_parse(self, text: str) -> ModelCondition:
        """Resolve a single operand: legacy `models contains "X"` or a bare identifier"""
        match = self.CONTAINS_PATTERN.search(text)
        if match:
            return ModelCondition(match.group(1))
        return ModelCondition(text.replace('"', '').replace("'", ''))


def should_hide_explicitly(title: str) -> bool:
    """
    Check for the explicit hide directive

    Backticks and surrounding whitespace are ignored and the comparison is
    case-insensitive, so `` `bullet:hide` `` and ``bullet:Hide`` both match.
    """
    cleaned = title.replace('`', '').strip().lower()
    return cleaned == appsettings.hideLiteral_normalized()


def extract_condition(title: str) -> Optional[str]:
    """
    Extract the expression body of an ``{% if ... %}`` directive

    Only the first directive in the title is considered.

    Returns:
        The stripped body, or None if the title carries no such directive

    Example:
        >>> extract_condition("`{% if mft-2000 or mft-5000 %}`")
        'mft-2000 or mft-5000'
    """
    cleaned = title.replace('`', '').strip()
    match = CONDITION_PATTERN.search(cleaned)
    return match.group(1).strip() if match else None


def evaluate_expression(body: str, enabled: Iterable[str]) -> bool:
    """
    Evaluate an expression body against the enabled models

    Args:
        body: Expression, e.g. "mft-2000 or mft-5000"
        enabled: Enabled model identifiers; empty means no filter

    Returns:
        True if the expression holds (or no models are enabled)
    """
    condition = ConditionParser().expression_parse(body)
    return ConditionEvaluator(enabled).evaluate(condition)


def hide_present(title: str) -> bool:
    """
    Check for the hide directive, also when it shares the heading with an
    ``{% if ... %}`` directive (the hide directive wins)
    """
    if should_hide_explicitly(title):
        return True
    remainder = CONDITION_PATTERN.sub('', title.replace('`', ''))
    return should_hide_explicitly(remainder)


def parse_toggle_directive(title: str) -> Directive:
    """Parse a toggle heading into a Directive"""
    if hide_present(title):
        return Directive.hide(source=title)

    condition = extract_condition(title)
    if condition is None:
        return Directive.none()

    return Directive.show_if(ConditionParser().expression_parse(condition), source=condition)


def should_show_toggle(title: str, enabled: Iterable[str]) -> bool:
    """
    Decide whether a toggle block is rendered

    The explicit hide directive wins over any condition; a heading without
    a directive is shown.
    """
    enabled = list(enabled)
    result = directive_evaluate(parse_toggle_directive(title), enabled)
    LOG(f"Toggle {title!r} with {enabled} -> {'show' if result else 'hide'}", level=2)
    return result
