"""
modelgate - Conditional visibility for exported document content

Decides, per toggle block or page, whether content is shown for the model
identifiers a request enabled (``?models=MFT-2000,MFT-5000``).
"""

__version__ = "1.0.0"

from .identifiers import parse_enabled_models, parse_query_string
from .toggles import (
    should_hide_explicitly,
    extract_condition,
    evaluate_expression,
    should_show_toggle,
    parse_toggle_directive,
    ConditionParser,
)
from .markers import (
    extract_show_markers,
    extract_hide_markers,
    matches_models,
    should_show_page,
    remove_markers,
    process_text_content,
    parse_marker_directive,
)
from .evaluator import ConditionEvaluator, EvaluationError, directive_evaluate
from .document import DocumentFilter, DocumentError, document_load, document_save
from .lexer import DirectiveLexer, directives_highlight
from .log import LOG, state_connectToLogger

__all__ = [
    "parse_enabled_models",
    "parse_query_string",
    "should_hide_explicitly",
    "extract_condition",
    "evaluate_expression",
    "should_show_toggle",
    "parse_toggle_directive",
    "ConditionParser",
    "extract_show_markers",
    "extract_hide_markers",
    "matches_models",
    "should_show_page",
    "remove_markers",
    "process_text_content",
    "parse_marker_directive",
    "ConditionEvaluator",
    "EvaluationError",
    "directive_evaluate",
    "DocumentFilter",
    "DocumentError",
    "document_load",
    "document_save",
    "DirectiveLexer",
    "directives_highlight",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
