from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


import pytest


@pytest.fixture
def nested_doc_text() -> str:
    return '{"a":{"b":{"c":1}}}'


@pytest.fixture
def key_pattern_doc() -> dict:
    return {"myKey": 1, "my_key": 2, "my-key": 3, "MyKey": 4, "MY_KEY": 5}
