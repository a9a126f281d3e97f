"""
Directive lexer tests

Tests tokenization of toggle directives and page markers.
"""

from pygments.token import Keyword, Name, Operator, Punctuation, String

from modelgate.lib.lexer import DirectiveLexer, directives_highlight


def tokens_get(text):
    return [(token, value) for token, value in DirectiveLexer().get_tokens(text) if value.strip()]


class TestDirectiveLexer:
    """Test token streams"""

    def test_hide_literal(self):
        assert (Keyword.Reserved, "bullet:hide") in tokens_get("`bullet:hide`")

    def test_condition(self):
        tokens = tokens_get("{% if mft-2000 or mft-5000 %}")
        assert tokens[0] == (Punctuation, "{%")
        assert (Keyword, "if") in tokens
        assert (Operator.Word, "or") in tokens
        assert (Name.Variable, "mft-5000") in tokens
        assert tokens[-1] == (Punctuation, "%}")

    def test_identifier_containing_keyword(self):
        assert (Name.Variable, "motor-x") in tokens_get("{% if motor-x %}")

    def test_legacy_contains(self):
        tokens = tokens_get('{% if models contains "MFT-2000" %}')
        assert (Operator.Word, "contains") in tokens
        assert (String, '"MFT-2000"') in tokens

    def test_markers(self):
        tokens = tokens_get("Guide %Show(MFT-2000 + MFT-5000)% %Hide (X)%")
        assert (Keyword.Declaration, "Show") in tokens
        assert (Keyword.Declaration, "Hide") in tokens
        assert (Operator, "+") in tokens
        assert (Name.Variable, "X") in tokens

    def test_highlight_keeps_text(self):
        rendered = directives_highlight("Guide %Show(MFT-2000)%")
        assert "Guide" in rendered
        assert "MFT-2000" in rendered
