"""출력 형식 직렬화 테스트."""

from __future__ import annotations

import io
import json

import pytest
import yaml

from freqcount.errors import EncodingError
from freqcount.output import OutputFormat, print_object, render, select_format


class TestSelectFormat:
    def test_default_is_record(self):
        assert select_format() is OutputFormat.RECORD

    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            ((True, False, False), OutputFormat.JSON),
            ((False, True, False), OutputFormat.YAML),
            ((False, False, True), OutputFormat.CSV),
            ((True, True, True), OutputFormat.JSON),
            ((False, True, True), OutputFormat.YAML),
        ],
    )
    def test_precedence(self, flags, expected):
        assert select_format(*flags) is expected


class TestRender:
    def test_record_list(self):
        assert render(["bar", "foo"], OutputFormat.RECORD) == "['bar', 'foo']\n"

    def test_record_mapping(self):
        assert render({"foo": 10, "bar": 5}, OutputFormat.RECORD) == "{'foo': 10, 'bar': 5}\n"

    def test_json(self):
        assert render(["foo", "bar"], OutputFormat.JSON) == '["foo", "bar"]\n'
        assert json.loads(render({"foo": 10, "bar": 5}, OutputFormat.JSON)) == {"foo": 10, "bar": 5}

    def test_json_keeps_non_ascii(self):
        assert render(["한국어", "é"], OutputFormat.JSON) == '["한국어", "é"]\n'

    def test_json_empty(self):
        assert render([], OutputFormat.JSON) == "[]\n"

    def test_yaml_list(self):
        assert render(["bar", "foo"], OutputFormat.YAML) == "- bar\n- foo\n"

    def test_yaml_mapping_keeps_order(self):
        text = render({"foo": 10, "bar": 5}, OutputFormat.YAML)
        assert text == "foo: 10\nbar: 5\n"

    def test_yaml_round_trips_ambiguous_scalars(self):
        tokens = ["yes", "null", "123", "- dash", "a: b"]
        assert yaml.safe_load(render(tokens, OutputFormat.YAML)) == tokens

    def test_csv_list(self):
        assert render(["foo", "a,b"], OutputFormat.CSV) == 'foo\n"a,b"\n'

    def test_csv_mapping(self):
        assert render({"foo": 10, "bar": 5}, OutputFormat.CSV) == "foo,10\nbar,5\n"

    def test_csv_empty(self):
        assert render([], OutputFormat.CSV) == ""

    def test_json_replaces_undecodable_bytes(self):
        text = render(["caf\u00e9", "\udcff"], OutputFormat.JSON)
        assert text == '["caf\u00e9", "\ufffd"]\n'
        text.encode("utf-8")

    def test_json_merges_tokens_replaced_alike(self):
        counts = json.loads(render({"\udcc3": 2, "a": 1, "\udcff": 3}, OutputFormat.JSON))
        assert counts == {"\ufffd": 5, "a": 1}

    def test_yaml_replaces_undecodable_bytes(self):
        assert yaml.safe_load(render(["\udca9", "b"], OutputFormat.YAML)) == ["\ufffd", "b"]

    def test_csv_keeps_undecodable_bytes(self):
        assert render(["\udcff"], OutputFormat.CSV) == "\udcff\n"

    @pytest.mark.parametrize("output_format", [OutputFormat.JSON, OutputFormat.YAML])
    def test_unserializable_payload(self, output_format):
        with pytest.raises(EncodingError):
            render({"token": object()}, output_format)


class TestPrintObject:
    def test_writes_to_stream(self):
        stream = io.StringIO()
        print_object(["foo"], OutputFormat.JSON, stream)
        assert stream.getvalue() == '["foo"]\n'

    def test_stream_encoding_failure(self):
        stream = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
        with pytest.raises(EncodingError):
            print_object(["한국어"], OutputFormat.JSON, stream)
