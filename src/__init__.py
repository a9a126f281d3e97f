"""
modelgate - Conditional visibility for exported document content

Toggle directives (`bullet:hide`, {% if ... %}) and page markers
(%Show(...)%, %Hide(...)%) evaluated against the models a request enables.
"""

__version__ = "1.0.0"

from .lib import (
    parse_enabled_models,
    should_show_toggle,
    should_show_page,
    remove_markers,
    DocumentFilter,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "parse_enabled_models",
    "should_show_toggle",
    "should_show_page",
    "remove_markers",
    "DocumentFilter",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
