"""
Document filter tests

Tests page/toggle filtering of a page tree and document load/save.
"""

import pytest

from modelgate.lib.document import DocumentFilter, DocumentError, document_load, document_save
from modelgate.models.document import Page, ContentBlock


def page_make() -> Page:
    return Page.from_dict({
        "id": "guide",
        "title": "Setup guide %Show(MFT-2000 + MFT-5000)%",
        "blocks": [
            {"id": "intro", "text": "Welcome %Hide(MFT-5000)%"},
            {
                "id": "t2000",
                "type": "toggle",
                "text": "`{% if mft-2000 %}`",
                "children": [{"id": "t2000.body", "text": "Calibrate the 2000"}],
            },
            {
                "id": "t5000",
                "type": "toggle",
                "text": "`{% if mft-5000 %}`",
                "children": [
                    {"id": "t5000.body", "text": "Calibrate the 5000"},
                    {"type": "toggle", "text": "`bullet:hide`", "children": [{"text": "Internal"}]},
                ],
            },
            {"id": "notes", "type": "toggle", "text": "`bullet:hide`", "children": [{"text": "Draft"}]},
        ],
    })


class TestDocumentModel:
    """Test building page trees from mappings"""

    def test_fallback_ids(self):
        page = page_make()
        nested = page.blocks[2].children[1]
        assert nested.id == "t5000.1"
        assert nested.children[0].id == "t5000.1.0"

    def test_title_key_accepted_for_blocks(self):
        block = ContentBlock.from_dict({"type": "toggle", "title": "{% if a %}"})
        assert block.text == "{% if a %}"
        assert block.is_toggle

    def test_to_dict_omits_empty_children(self):
        assert ContentBlock(id="x", text="hi").to_dict() == {"id": "x", "type": "text", "text": "hi"}


class TestDocumentFilter:
    """Test filtering a page for enabled models"""

    def test_page_hidden_by_show_marker(self):
        document_filter = DocumentFilter(["MFT-9000"])
        assert document_filter.page_filter(page_make()) is None
        assert document_filter.decisions[0].kind == "page"
        assert document_filter.decisions[0].shown is False

    def test_toggles_filtered_for_model(self):
        filtered = DocumentFilter(["MFT-2000"]).page_filter(page_make())
        assert filtered.title == "Setup guide"
        assert [block.id for block in filtered.blocks] == ["intro", "t2000"]
        assert filtered.blocks[0].text == "Welcome"
        assert filtered.blocks[1].children[0].text == "Calibrate the 2000"

    def test_nested_hide_removed(self):
        filtered = DocumentFilter(["MFT-5000"]).page_filter(page_make())
        assert [block.id for block in filtered.blocks] == ["intro", "t5000"]
        assert [child.id for child in filtered.blocks[1].children] == ["t5000.body"]

    def test_no_models_keeps_all_but_explicit_hides(self):
        document_filter = DocumentFilter([])
        filtered = document_filter.page_filter(page_make())
        assert [block.id for block in filtered.blocks] == ["intro", "t2000", "t5000"]
        assert document_filter.hiddenCount_get() == 2

    def test_markers_kept_when_stripping_disabled(self):
        filtered = DocumentFilter(["MFT-2000"], strip_markers=False).page_filter(page_make())
        assert filtered.title == "Setup guide %Show(MFT-2000 + MFT-5000)%"

    def test_source_page_not_modified(self):
        page = page_make()
        DocumentFilter(["MFT-2000"]).page_filter(page)
        assert len(page.blocks) == 4
        assert page.title.endswith("%Show(MFT-2000 + MFT-5000)%")


class TestDocumentIO:
    """Test reading and writing page documents"""

    def test_yaml_round_trip(self, tmp_path):
        path = document_save(page_make(), tmp_path / "guide.yaml")
        loaded = document_load(path)
        assert loaded == page_make()

    def test_json_accepted(self, tmp_path):
        path = tmp_path / "page.json"
        path.write_text('{"id": "p", "title": "T", "blocks": [{"id": "b", "text": "x"}]}')
        page = document_load(path)
        assert page.title == "T"
        assert page.blocks[0].id == "b"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert document_load(path) == Page(id="page")

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentError):
            document_load(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("title: [unclosed")
        with pytest.raises(DocumentError):
            document_load(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(DocumentError):
            document_load(path)

    def test_malformed_blocks(self, tmp_path):
        path = tmp_path / "blocks.yaml"
        path.write_text("title: T\nblocks: [1, 2]\n")
        with pytest.raises(DocumentError):
            document_load(path)
