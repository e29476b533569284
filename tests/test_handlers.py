import json
import os

from json_inspector.config import InspectorConfig
from json_inspector.handlers import (
    clear_handler,
    export_handler,
    load_file_handler,
    process_handler,
    sample_handler,
    summary_handler,
)
from json_inspector.parser import MAX_NESTING_DEPTH
from json_inspector.validator import validate


def test_formatted_view():
    output, status = process_handler('{"a": [1]}', "formatted", 2, False)

    assert output == '{\n  "a": [\n    1\n  ]\n}'
    assert status.startswith("Valid JSON.")
    assert "Warnings" not in status


def test_sorted_minified_and_stats_views():
    text = '{"b": 1, "a": 2}'

    output, _ = process_handler(text, "formatted", 0, True)
    assert output == '{\n"a": 2,\n"b": 1\n}'

    output, _ = process_handler(text, "minified", 2, False)
    assert output == '{"b":1,"a":2}'

    output, _ = process_handler(text, "stats", 2, False)
    assert json.loads(output)["key_analysis"]["total_keys"] == 2


def test_indent_falls_back_to_config():
    output, _ = process_handler('{"a": 1}', "formatted", None, False, config=InspectorConfig(indent_size=4))

    assert output == '{\n    "a": 1\n}'


def test_syntax_errors_show_message_and_location():
    output, status = process_handler('{"a": }', "formatted", 2, False)

    assert output == ""
    assert status.startswith("Error: ")
    assert "(line 1, column 7)" in status


def test_empty_input():
    output, status = process_handler("", "formatted", 2, False)

    assert output == ""
    assert status == "Error: JSON input is empty"


def test_warnings_are_reported_without_blocking():
    output, status = process_handler('{"url": "http://example.com"}', "minified", 2, False)

    assert output == '{"url":"http://example.com"}'
    assert "Comments detected" in status


def test_oversized_input_is_rejected_before_parsing():
    output, status = process_handler('{"a": 1}', "formatted", 2, False, config=InspectorConfig(max_input_bytes=4))

    assert output == ""
    assert status.startswith("Input too large.")


def test_negative_indent_is_reported():
    output, status = process_handler('{"a": 1}', "formatted", -2, False)

    assert output == ""
    assert status.startswith("Error: indent_size")


def test_load_file(tmp_path):
    path = tmp_path / "in.json"
    path.write_text('{"a": 1}\n', encoding="utf-8")

    text, preview, status = load_file_handler(str(path))

    assert text == '{"a": 1}\n'
    assert preview == text
    assert status == "Loaded 9 bytes (2 lines)."


def test_load_file_rejects_large_files(tmp_path):
    path = tmp_path / "big.json"
    path.write_text("[" + "0," * 100 + "0]", encoding="utf-8")

    _, preview, status = load_file_handler(str(path), config=InspectorConfig(max_input_bytes=100))

    assert preview == ""
    assert status.startswith("File too large.")


def test_load_file_without_upload():
    _, _, status = load_file_handler(None)

    assert status == "No file uploaded."


def test_export_writes_the_output(tmp_path, monkeypatch):
    monkeypatch.setattr("tempfile.tempdir", str(tmp_path))

    path, status = export_handler('{"a":1}', "result")

    assert path == os.path.join(str(tmp_path), "result.json")
    with open(path, encoding="utf-8") as f:
        assert f.read() == '{"a":1}'
    assert status.startswith("Export successful!")


def test_export_without_output():
    assert export_handler("", "x") == (None, "Nothing to export.")


def test_summary_sample_and_clear():
    assert summary_handler("   ") is None
    assert summary_handler('{"a": 1}')["keys"] == 1
    assert validate(sample_handler()).is_valid
    assert clear_handler() == ("", "", "", "", None)


def test_stats_view_for_lone_surrogates():
    output, status = process_handler('["\\ud800"]', "stats", 2, False)

    assert json.loads(output)["type"] == "array"
    assert status.startswith("Valid JSON.")


def test_export_of_unencodable_output_reports_error(tmp_path, monkeypatch):
    monkeypatch.setattr("tempfile.tempdir", str(tmp_path))

    path, status = export_handler('["\ud800"]', "result")

    assert path is None
    assert status.startswith("Error during export:")


def test_nesting_past_the_limit_is_reported():
    depth = MAX_NESTING_DEPTH + 400
    output, status = process_handler("[" * depth + "]" * depth, "stats", 2, False)

    assert output == ""
    assert status == "Error: JSON too deeply nested"


def test_huge_integer_literal_is_reported():
    output, status = process_handler("[" + "1" * 400 + "]", "stats", 2, False)

    assert output == ""
    assert status.startswith("Error: Number out of range")
