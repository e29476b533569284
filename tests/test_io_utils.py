import io

import pytest

from json_inspector.errors import InputTooLargeError
from json_inspector.io_utils import read_json_text


class NamedUpload:
    def __init__(self, name):
        self.name = name


def test_reads_from_a_path(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{"a": 1}', encoding="utf-8")

    assert read_json_text(str(path)) == '{"a": 1}'
    assert read_json_text(NamedUpload(str(path))) == '{"a": 1}'


def test_strips_a_utf8_bom(tmp_path):
    path = tmp_path / "bom.json"
    path.write_bytes(b'\xef\xbb\xbf{"a": "\xc3\xa9"}')

    assert read_json_text(str(path)) == '{"a": "é"}'


def test_reads_file_like_objects():
    assert read_json_text(io.BytesIO(b"[1, 2]")) == "[1, 2]"
    assert read_json_text(io.StringIO("[3]")) == "[3]"


def test_rejects_oversized_files_before_parsing(tmp_path):
    path = tmp_path / "big.json"
    path.write_text("[" + "1," * 9 + "1]", encoding="utf-8")

    with pytest.raises(InputTooLargeError) as exc_info:
        read_json_text(str(path), max_bytes=10)

    assert exc_info.value.size == 21
    assert exc_info.value.limit == 10
    assert isinstance(exc_info.value, ValueError)


def test_rejects_oversized_streams():
    with pytest.raises(InputTooLargeError):
        read_json_text(io.BytesIO(b"x" * 20), max_bytes=10)


def test_missing_upload():
    with pytest.raises(ValueError, match="No file uploaded"):
        read_json_text(None)
