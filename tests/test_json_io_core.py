"""Tests for activation payload resolution and document loading."""
from types import SimpleNamespace

import pytest

from review_core.domain_impl.json import json_io_core as io
from review_core.exceptions import PayloadError, SourceReadError


class TestPayloadSource:
    def test_string_payload(self):
        assert io.payload_source("/tmp/data.json") == "/tmp/data.json"

    def test_list_payload_uses_first_path(self):
        payload = [{"path": "/tmp/a.json"}, {"path": "/tmp/b.json"}]
        assert io.payload_source(payload) == "/tmp/a.json"

    def test_list_payload_with_attribute_entries(self):
        assert io.payload_source([SimpleNamespace(path="/tmp/c.json")]) == "/tmp/c.json"

    def test_empty_list_is_rejected(self):
        with pytest.raises(PayloadError):
            io.payload_source([])

    def test_entry_without_path_is_rejected(self):
        with pytest.raises(PayloadError):
            io.payload_source([{"name": "x"}])

    def test_other_types_are_rejected(self):
        with pytest.raises(PayloadError):
            io.payload_source(42)


class TestInlineDetection:
    @pytest.mark.parametrize("text", ["{}", "[1,2,3]", '{"a": 1}', "[]"])
    def test_bracketed_text_is_inline(self, text):
        assert io.looks_like_inline_json(text)

    @pytest.mark.parametrize("text", [" [1]", "[1] ", "{abc]", "[abc}", "/tmp/data.json", "{", ""])
    def test_other_text_is_a_path(self, text):
        assert not io.looks_like_inline_json(text)


class TestResolveInput:
    def test_inline_json_never_reads(self):
        def read_file(path):
            raise AssertionError("should not read")

        resolved = io.resolve_input("[1,2,3]", read_file)
        assert resolved.text == "[1,2,3]"
        assert resolved.is_inline

    def test_path_is_read_through_callable(self):
        reads = []

        def read_file(path):
            reads.append(path)
            return '{"ok": true}'

        resolved = io.resolve_input("/tmp/data.json", read_file)
        assert reads == ["/tmp/data.json"]
        assert resolved.source_path == "/tmp/data.json"
        assert not resolved.is_inline

    def test_mismatched_brackets_are_treated_as_path(self):
        reads = []
        io.resolve_input("{abc]", lambda path: reads.append(path) or "")
        assert reads == ["{abc]"]

    def test_os_errors_become_source_read_errors(self):
        def read_file(path):
            raise FileNotFoundError(2, "No such file", path)

        with pytest.raises(SourceReadError) as info:
            io.resolve_input("/missing.json", read_file)
        assert info.value.path == "/missing.json"
        assert "/missing.json" in str(info.value)

    def test_source_read_errors_pass_through(self):
        original = SourceReadError("/x.json", "denied")

        def read_file(path):
            raise original

        with pytest.raises(SourceReadError) as info:
            io.resolve_input("/x.json", read_file)
        assert info.value is original


class TestReadTextFile:
    def test_reads_utf8_with_bom(self, tmp_path):
        target = tmp_path / "doc.json"
        target.write_bytes(b"\xef\xbb\xbf" + '{"name": "é"}'.encode("utf-8"))
        assert io.read_text_file(str(target)) == '{"name": "é"}'

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceReadError):
            io.read_text_file(str(tmp_path / "nope.json"))

    def test_undecodable_file(self, tmp_path):
        target = tmp_path / "bad.json"
        target.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(SourceReadError):
            io.read_text_file(str(target))


class TestLoadDocument:
    def test_inline_document(self):
        document, resolved = io.load_document('{"a": "[1, 2]"}', lambda path: "")
        assert document == {"a": [1, 2]}
        assert resolved.is_inline

    def test_file_document(self, tmp_path):
        target = tmp_path / "doc.json"
        target.write_text('{"a": "true"}', encoding="utf-8")
        document, resolved = io.load_document([{"path": str(target)}], io.read_text_file)
        assert document == {"a": True}
        assert resolved.source_path == str(target)

    def test_file_document_without_literal_unwrapping(self, tmp_path):
        target = tmp_path / "doc.json"
        target.write_text('{"a": "true"}', encoding="utf-8")
        document, _ = io.load_document(str(target), io.read_text_file, unwrap_literals=False)
        assert document == {"a": "true"}

    def test_non_json_file_shows_as_text(self, tmp_path):
        target = tmp_path / "notes.txt"
        target.write_text("just some notes", encoding="utf-8")
        document, _ = io.load_document(str(target), io.read_text_file)
        assert document == "just some notes"


class TestHostReaderFailures:
    @pytest.mark.parametrize("error", [RuntimeError("host service unavailable"), TypeError("bad path type")])
    def test_any_expected_reader_error_becomes_source_read_error(self, error):
        def read_file(path):
            raise error

        with pytest.raises(SourceReadError) as info:
            io.resolve_input("/x.json", read_file)
        assert info.value.path == "/x.json"
        assert info.value.__cause__ is error
