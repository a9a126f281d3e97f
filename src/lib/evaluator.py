"""
Condition evaluator

Walks a condition tree against the enabled model identifiers and resolves
directives to a show/hide decision. Shared by toggle and marker directives.
"""

from typing import Iterable, cast

from ..models.directives import (
    Condition,
    ConditionType,
    ModelCondition,
    AnyCondition,
    AllCondition,
    NotCondition,
    Directive,
    DirectiveKind,
)
from .log import LOG


class EvaluationError(Exception):
    """Raised when a condition tree contains an unknown node type"""
    pass


class ConditionEvaluator:
    """
    Evaluates condition trees against a set of enabled model identifiers

    An empty enabled set means "no filter": every model leaf is true.
    """

    def __init__(self, enabled: Iterable[str]) -> None:
        self.enabled = [model.upper() for model in enabled]

    def evaluate(self, condition: Condition) -> bool:
        """
        Evaluate a condition tree

        Raises:
            EvaluationError: On a node type the evaluator does not know
        """
        condition_type = condition.get_type()

        if condition_type == ConditionType.MODEL:
            return self._evaluate_model(cast(ModelCondition, condition))
        elif condition_type == ConditionType.ANY:
            return any(self.evaluate(item) for item in cast(AnyCondition, condition).items)
        elif condition_type == ConditionType.ALL:
            return all(self.evaluate(item) for item in cast(AllCondition, condition).items)
        elif condition_type == ConditionType.NOT:
            return not self.evaluate(cast(NotCondition, condition).item)
        else:
            raise EvaluationError(f"Unknown condition type: {condition_type}")

    def _evaluate_model(self, condition: ModelCondition) -> bool:
        if condition.name and condition.name in self.enabled:
            return True
        # Membership failed; with no models requested everything stays visible
        return not self.enabled


def directive_evaluate(directive: Directive, enabled: Iterable[str]) -> bool:
    """
    Resolve a directive to a visibility decision

    Args:
        directive: Parsed directive (HIDE, SHOW_IF or NONE)
        enabled: Enabled model identifiers

    Returns:
        True if the content unit should be shown
    """
    if directive.kind == DirectiveKind.HIDE:
        return False
    if directive.kind == DirectiveKind.NONE or directive.condition is None:
        return True

    evaluator = ConditionEvaluator(enabled)
    if not evaluator.enabled:
        return True

    result = evaluator.evaluate(directive.condition)
    LOG(f"{directive.condition} with {evaluator.enabled} -> {result}", level=3)
    return result
