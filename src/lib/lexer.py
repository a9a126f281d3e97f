"""
Custom Pygments lexer for visibility directives

Highlights the directive sub-language inside content text so decision
reports show at a glance what a title asked for.

Token types:
- Keyword.Reserved: `bullet:hide`
- Keyword: `if`
- Operator.Word: `or`, `and`, `contains`
- Keyword.Declaration: Show / Hide marker names
- Name.Variable: Model identifiers
- String: Quoted identifiers (legacy `models contains "X"`)
- Punctuation: {% %}, %( )%, backticks
"""

import re

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
    Operator,
)


class DirectiveLexer(RegexLexer):
    """
    Lexer for toggle directives and page markers

    Example:
        Setup %Show(MFT-2000 + MFT-5000)%

    Tokens:
        Setup     → Text
        %         → Punctuation
        Show      → Keyword.Declaration
        (         → Punctuation
        MFT-2000  → Name.Variable
        +         → Operator
        MFT-5000  → Name.Variable
        )%        → Punctuation
    """

    name = 'Modelgate directives'
    aliases = ['modelgate', 'directive']
    filenames = []

    flags = re.IGNORECASE | re.MULTILINE

    tokens = {
        'root': [
            # Inline code formatting around headings
            (r'`', Punctuation),

            # Explicit hide
            (r'bullet:hide', Keyword.Reserved),

            # {% if ... %}
            (r'\{%', Punctuation, 'condition'),

            # %Show(...)% / %Hide (...)%
            (r'(%)(show|hide)(\s*)(\()',
             bygroups(Punctuation, Keyword.Declaration, Text, Punctuation), 'marker'),

            # Everything else is text
            (r'[^`{%b]+', Text),
            (r'.', Text),
        ],

        'condition': [
            (r'%\}', Punctuation, '#pop'),
            (r'if\b', Keyword),
            (r'(or|and)\b', Operator.Word),
            (r'(models)(\s+)(contains)\b', bygroups(Name.Builtin, Text, Operator.Word)),
            (r'"[^"]*"', String),
            (r"'[^']*'", String),
            (r'\s+', Text),
            (r'[\w.:-]+', Name.Variable),
            (r'.', Text),
        ],

        'marker': [
            (r'\)%', Punctuation, '#pop'),
            (r'[+,]', Operator),
            (r'\s+', Text),
            (r'[^\s+,)]+', Name.Variable),
            (r'.', Text),
        ],
    }


def get_lexer() -> DirectiveLexer:
    """
    Get the DirectiveLexer instance

    Returns:
        DirectiveLexer instance ready for use with Pygments
    """
    return DirectiveLexer()


def directives_highlight(text: str) -> str:
    """Render text with its directives highlighted for a terminal"""
    return highlight(text, get_lexer(), TerminalFormatter()).rstrip('\n')
