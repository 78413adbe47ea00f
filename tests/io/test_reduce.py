"""Tests for boundary reduction of host objects in `refgraph.io.reduce`."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum

import pytest
from pydantic import BaseModel

from refgraph.core.errors import UnsupportedValueKind
from refgraph.io.reduce import reduce_value


class Basic:
    def __init__(self) -> None:
        self.a = 69
        self.b = "i<3astolfo"
        self.c = True
        self._hidden = "private"


class Recursive:
    def __init__(self) -> None:
        self.a = 69
        self.d = self


@dataclass
class Node:
    name: str
    children: list["Node"] = field(default_factory=list)
    parent: "Node | None" = None


class Colour(Enum):
    RED = "red"


class Item(BaseModel):
    sku: str
    tags: list[str] = []


def test_reduce_plain_values_are_copied_not_aliased() -> None:
    value = {"a": [1, 2], "b": None}

    out = reduce_value(value)

    assert out == value
    assert out is not value
    assert out["a"] is not value["a"]


def test_reduce_instance_public_attributes_only() -> None:
    assert reduce_value(Basic()) == {"a": 69, "b": "i<3astolfo", "c": True}


def test_reduce_self_referencing_instance() -> None:
    out = reduce_value(Recursive())

    assert out["a"] == 69
    assert out["d"] is out


def test_reduce_dataclass_tree_with_parent_links() -> None:
    root = Node("root")
    child = Node("child", parent=root)
    root.children.append(child)

    out = reduce_value(root)

    assert list(out) == ["name", "children", "parent"]
    assert out["parent"] is None
    assert out["children"][0]["parent"] is out


def test_reduce_pydantic_model_declared_fields() -> None:
    assert reduce_value([Item(sku="x1", tags=["a"])]) == [{"sku": "x1", "tags": ["a"]}]


def test_reduce_tuple_and_mapping_and_enum() -> None:
    shared = (1, 2)
    out = reduce_value(OrderedDict([("t", shared), ("u", shared), ("c", Colour.RED)]))

    assert out == {"t": [1, 2], "u": [1, 2], "c": "red"}
    assert out["t"] is out["u"]


@pytest.mark.parametrize("bad", [len, lambda: 1, {1, 2}, b"raw", int, pytest])
def test_reduce_rejects_unsupported_kinds(bad: object) -> None:
    with pytest.raises(UnsupportedValueKind):
        reduce_value({"bad": bad})


def test_reduce_rejects_non_string_keys() -> None:
    with pytest.raises(UnsupportedValueKind, match="record key"):
        reduce_value({("a", 1): 1})
