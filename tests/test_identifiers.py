"""
Enabled model parsing tests

Tests normalization of the ``models`` query value.
"""

import pytest

from modelgate.lib.identifiers import parse_enabled_models, parse_query_string


class TestParseEnabledModels:
    """Test parsing of the raw query value"""

    def test_comma_separated_with_spaces(self):
        """Pieces are trimmed and upper-cased"""
        assert parse_enabled_models("mft-2000, mft-5000") == ["MFT-2000", "MFT-5000"]

    @pytest.mark.parametrize("raw", [None, "", [], [""]])
    def test_missing_or_empty_input(self, raw):
        """Absent input means no filter"""
        assert parse_enabled_models(raw) == []

    def test_sequence_uses_first_element(self):
        """Repeated query keys collapse to their first occurrence"""
        assert parse_enabled_models(["mft-2000,mft-2000a", "mft-5000"]) == ["MFT-2000", "MFT-2000A"]

    def test_empty_pieces_discarded(self):
        """Stray commas and blanks do not produce identifiers"""
        assert parse_enabled_models(" , mft-2000,,  ,") == ["MFT-2000"]

    def test_order_and_duplicates_preserved(self):
        """No reordering or deduplication"""
        assert parse_enabled_models("b,a,b") == ["B", "A", "B"]

    def test_non_string_element_degrades(self):
        """Malformed input never raises"""
        assert parse_enabled_models([None]) == []


class TestParseQueryString:
    """Test parsing from a full URL query string"""

    def test_leading_question_mark(self):
        assert parse_query_string("?models=mft-2000,mft-5000&lang=en") == ["MFT-2000", "MFT-5000"]

    def test_repeated_key_first_wins(self):
        assert parse_query_string("models=a,b&models=c") == ["A", "B"]

    def test_missing_parameter(self):
        assert parse_query_string("lang=en") == []

    def test_custom_parameter_name(self):
        assert parse_query_string("variants=x1", param="variants") == ["X1"]
