import math

import pytest

from json_inspector.structure import (
    analyze_nesting,
    analyze_structure,
    build_hierarchy,
    calculate_complexity,
    compute_depth,
)


@pytest.mark.parametrize(
    "doc, depth",
    [
        (5, 0),
        (None, 0),
        ([], 1),
        ({}, 1),
        ({"a": {"b": {"c": 1}}}, 3),
        ([[], [[]]], 3),
        ([1, [2, [3]]], 3),
    ],
)
def test_compute_depth(doc, depth):
    assert compute_depth(doc) == depth


def test_hierarchy_mirrors_the_tree():
    tree = build_hierarchy({"a": [1, {"b": None}]})

    assert tree["path"] == ""
    assert tree["type"] == "object"
    assert tree["keys"] == ["a"]
    assert tree["key_count"] == 1
    assert tree["depth"] == 0

    array_node = tree["children"]["a"]
    assert array_node["path"] == "a"
    assert array_node["type"] == "array"
    assert array_node["length"] == 2
    assert array_node["depth"] == 1
    assert array_node["children"][0] == {"path": "a[0]", "type": "number", "depth": 2, "value": 1}

    leaf = array_node["children"][1]["children"]["b"]
    assert leaf["path"] == "a[1].b"
    assert leaf["type"] == "null"
    assert leaf["depth"] == 3


def test_hierarchy_of_a_scalar_document():
    assert build_hierarchy(True) == {"path": "", "type": "boolean", "depth": 0, "value": True}


def test_complexity_scores():
    complexity = calculate_complexity({"a": [1, 2], "b": {}})

    assert complexity["cyclomatic"] == 4
    assert complexity["cognitive"] == pytest.approx(2 * math.log2(3))
    assert complexity["structural"] == 2
    assert complexity["data"] == 3


def test_complexity_of_a_scalar_is_zero():
    assert calculate_complexity("x") == {"cyclomatic": 0, "cognitive": 0.0, "structural": 0, "data": 0}


def test_nesting_distribution():
    nesting = analyze_nesting({"a": [1, 2], "b": {}})

    assert nesting["max_depth"] == 1
    assert nesting["average_depth"] == pytest.approx(2 / 3)
    assert nesting["depth_distribution"] == {0: 1, 1: 2}


def test_nesting_without_containers():
    assert analyze_nesting(5) == {"max_depth": 0, "average_depth": 0, "depth_distribution": {}}


def test_analyze_structure_sections():
    assert set(analyze_structure([])) == {"hierarchy", "complexity", "nesting"}
