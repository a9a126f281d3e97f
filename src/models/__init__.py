"""
Models package for modelgate

Contains data structures for directives, documents and the CLI pipeline.
"""

from .state import ProgramState, pipeline
from .directives import (
    Directive,
    DirectiveKind,
    Condition,
    ConditionType,
    ModelCondition,
    AnyCondition,
    AllCondition,
    NotCondition,
)
from .document import Page, ContentBlock, BlockDecision

__all__ = [
    "ProgramState",
    "pipeline",
    "Directive",
    "DirectiveKind",
    "Condition",
    "ConditionType",
    "ModelCondition",
    "AnyCondition",
    "AllCondition",
    "NotCondition",
    "Page",
    "ContentBlock",
    "BlockDecision",
]
