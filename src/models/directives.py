"""
Directive and condition models

Both directive grammars (toggle headings and page markers) are parsed into
the same shapes defined here, so a single evaluator decides visibility:

    Directive.hide()            `bullet:hide`
    Directive.show_if(cond)     {% if ... %} / %Show(...)% / %Hide(...)%
    Directive.none()            no directive found
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class DirectiveKind(Enum):
    """Outcome categories of directive parsing"""
    HIDE = "hide"          # unconditional hide, overrides everything
    SHOW_IF = "show_if"    # visibility depends on a condition
    NONE = "none"          # nothing recognized; shown


class ConditionType(Enum):
    """Node types of the condition tree"""
    MODEL = "model"
    ANY = "any"
    ALL = "all"
    NOT = "not"


@dataclass(frozen=True)
class Condition(ABC):
    """Base class for condition tree nodes"""

    @abstractmethod
    def get_type(self) -> ConditionType:
        pass

    def __str__(self) -> str:
        return self._to_string()

    @abstractmethod
    def _to_string(self) -> str:
        pass


@dataclass(frozen=True)
class ModelCondition(Condition):
    """
    Leaf predicate: the model identifier is enabled.

    The name is stored upper-cased; comparison against the enabled set is
    case-insensitive because both sides are normalized.
    """
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.strip().upper())

    def get_type(self) -> ConditionType:
        return ConditionType.MODEL

    def _to_string(self) -> str:
        return self.name


@dataclass(frozen=True)
class AnyCondition(Condition):
    """Flat OR over any number of operands. Empty means false."""
    items: Tuple[Condition, ...] = ()

    def get_type(self) -> ConditionType:
        return ConditionType.ANY

    def _to_string(self) -> str:
        return "(" + " or ".join(str(item) for item in self.items) + ")"


@dataclass(frozen=True)
class AllCondition(Condition):
    """Flat AND over any number of operands. Empty means true."""
    items: Tuple[Condition, ...] = ()

    def get_type(self) -> ConditionType:
        return ConditionType.ALL

    def _to_string(self) -> str:
        return "(" + " and ".join(str(item) for item in self.items) + ")"


@dataclass(frozen=True)
class NotCondition(Condition):
    """Negation; produced only for page-level %Hide()% groups"""
    item: Condition

    def get_type(self) -> ConditionType:
        return ConditionType.NOT

    def _to_string(self) -> str:
        return f"not {self.item}"


@dataclass(frozen=True)
class Directive:
    """
    A parsed visibility directive for one content unit

    Attributes:
        kind: HIDE, SHOW_IF or NONE
        condition: Condition tree, set only for SHOW_IF
        source: The directive text it was parsed from (for diagnostics)
    """
    kind: DirectiveKind
    condition: Optional[Condition] = None
    source: str = field(default="", compare=False)

    @classmethod
    def hide(cls, source: str = "") -> "Directive":
        return cls(DirectiveKind.HIDE, source=source)

    @classmethod
    def show_if(cls, condition: Condition, source: str = "") -> "Directive":
        return cls(DirectiveKind.SHOW_IF, condition=condition, source=source)

    @classmethod
    def none(cls) -> "Directive":
        return cls(DirectiveKind.NONE)
