"""
Tests for the atomic JSON writer.
"""

from pathlib import Path

import pytest

from swagger_blocks import OutputError
from swagger_blocks.writer import AtomicJsonWriter


class TestRender:
    def test_keeps_declaration_order(self):
        text = AtomicJsonWriter(indent=None).render({"swaggerVersion": "1.2", "apiVersion": "1.0.0"})
        assert text == '{"swaggerVersion": "1.2", "apiVersion": "1.0.0"}\n'

    def test_non_ascii_is_kept(self):
        assert AtomicJsonWriter(indent=None).render({"title": "Café"}) == '{"title": "Café"}\n'

    def test_non_object_is_rejected(self):
        with pytest.raises(OutputError, match="JSON objects"):
            AtomicJsonWriter().render(["/pets"])

    def test_unserializable_value_is_rejected(self):
        with pytest.raises(OutputError, match="not JSON serializable"):
            AtomicJsonWriter().render({"default": object()})


class TestWrite:
    def test_writes_document(self, tmp_path):
        target = tmp_path / "docs" / "api-docs.json"
        AtomicJsonWriter().write(target, {"swaggerVersion": "1.2"})
        assert target.read_text(encoding="utf-8") == '{\n  "swaggerVersion": "1.2"\n}\n'

    def test_invalid_document_leaves_target_untouched(self, tmp_path):
        target = tmp_path / "api-docs.json"
        target.write_text("{}", encoding="utf-8")

        with pytest.raises(OutputError):
            AtomicJsonWriter().write(target, {"default": object()})

        assert target.read_text(encoding="utf-8") == "{}"
        assert list(tmp_path.iterdir()) == [target]

    def test_failed_replace_removes_temporary_file(self, tmp_path, monkeypatch):
        def fail(self, target):
            raise OSError("disk full")

        monkeypatch.setattr(Path, "replace", fail)
        with pytest.raises(OSError, match="disk full"):
            AtomicJsonWriter().write(tmp_path / "api-docs.json", {"swagger": "2.0"})
        assert list(tmp_path.iterdir()) == []
