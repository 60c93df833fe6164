"""Unit tests for core/ast.py"""

import json

import pytest
from pydantic import TypeAdapter, ValidationError

from fencelight.core.ast import (
    Attr,
    Block,
    Citation,
    CodeBlock,
    ColWidth,
    Envelope,
    Header,
    Inline,
    Para,
    RawBlock,
    Space,
    Str,
    Table,
)


BLOCK = TypeAdapter(Block)
INLINE = TypeAdapter(Inline)


def test_attr_from_triple():
    """Attr decodes pandoc's [id, classes, key-values] array into named fields."""
    attr = Attr.model_validate(["main", ["js", "numberLines"], [["startFrom", "10"]]])
    assert attr.identifier == "main"
    assert attr.classes == ["js", "numberLines"]
    assert attr.attributes == [("startFrom", "10")]


def test_attr_dumps_back_to_triple():
    """Attr serializes to the same positional array it was read from."""
    raw = ["main", ["js"], [["startFrom", "10"]]]
    assert Attr.model_validate(raw).model_dump(mode="json") == raw


def test_attr_wrong_arity():
    """An Attr array with the wrong number of elements is rejected."""
    with pytest.raises(ValidationError):
        Attr.model_validate(["only-id", []])


def test_block_dispatch_on_tag():
    """The `t` tag selects the concrete Block model."""
    node = BLOCK.validate_python({"t": "CodeBlock", "c": [["", ["js"], []], "let x = 1;"]})
    assert isinstance(node, CodeBlock)
    attr, text = node.c
    assert attr.classes == ["js"]
    assert text == "let x = 1;"


def test_unknown_tag_rejected():
    """A tag outside the closed set of node kinds is a validation error."""
    with pytest.raises(ValidationError):
        BLOCK.validate_python({"t": "Blink", "c": []})


def test_payload_shape_enforced():
    """A payload that does not match its kind's shape is a validation error."""
    with pytest.raises(ValidationError):
        BLOCK.validate_python({"t": "Header", "c": ["one", ["", [], []], []]})


def test_extra_keys_rejected():
    """Unexpected keys would be lost on re-encoding, so they are rejected."""
    with pytest.raises(ValidationError):
        INLINE.validate_python({"t": "Str", "c": "x", "extra": 1})


def test_leaf_inline_has_no_payload():
    """Space decodes without a `c` field and dumps back without one."""
    node = INLINE.validate_python({"t": "Space"})
    assert isinstance(node, Space)
    assert node.model_dump(mode="json") == {"t": "Space"}


def test_nodes_are_frozen():
    """Nodes are immutable values."""
    node = Str(c="x")
    with pytest.raises(ValidationError):
        node.c = "y"


def test_raw_block_construction():
    """RawBlock can be built directly with its tag defaulted."""
    node = RawBlock(c=("html", "<b>x</b>"))
    assert node.model_dump(mode="json") == {"t": "RawBlock", "c": ["html", "<b>x</b>"]}


def test_header_nested_inlines():
    """Header payload is (level, Attr, inlines) with inline kinds resolved."""
    node = BLOCK.validate_python({"t": "Header", "c": [2, ["h", [], []], [{"t": "Str", "c": "Hi"}]]})
    assert isinstance(node, Header)
    level, attr, inlines = node.c
    assert level == 2
    assert attr.identifier == "h"
    assert isinstance(inlines[0], Str)


def test_citation_uses_pandoc_keys():
    """Citation reads and writes pandoc's camelCase keys in pandoc's order."""
    raw = {
        "citationId": "doe99",
        "citationPrefix": [],
        "citationSuffix": [{"t": "Str", "c": "p. 3"}],
        "citationMode": {"t": "AuthorInText"},
        "citationNoteNum": 2,
        "citationHash": 0,
    }
    citation = Citation.model_validate(raw)
    assert citation.id == "doe99"
    assert citation.mode.t == "AuthorInText"
    dumped = citation.model_dump(mode="json", by_alias=True)
    assert dumped == raw
    assert list(dumped) == list(raw)


def test_col_width_keeps_number_type():
    """ColWidth keeps integers as integers and floats as floats."""
    assert isinstance(ColWidth.model_validate({"t": "ColWidth", "c": 1}).c, int)
    assert isinstance(ColWidth.model_validate({"t": "ColWidth", "c": 0.5}).c, float)


def test_kitchen_sink_validates(kitchen_sink):
    """Every node kind in the fixture document decodes into its model."""
    envelope = Envelope.model_validate_json(kitchen_sink)
    assert envelope.api_version == [1, 23, 1]
    assert isinstance(envelope.blocks[0], Header)
    assert isinstance(envelope.blocks[1], Para)
    assert any(isinstance(b, Table) for b in envelope.blocks)


@pytest.mark.parametrize("raw", [
    {"t": "Header", "c": ["2", ["", [], []], []]},
    {"t": "Header", "c": [2.0, ["", [], []], []]},
    {"t": "Header", "c": [True, ["", [], []], []]},
])
def test_integers_not_coerced(raw):
    """Numeric payload fields accept JSON integers only, never strings, floats or booleans."""
    with pytest.raises(ValidationError):
        BLOCK.validate_json(json.dumps(raw))


def test_col_width_string_rejected():
    """A column width given as a string is rejected rather than converted."""
    with pytest.raises(ValidationError):
        ColWidth.model_validate_json('{"t": "ColWidth", "c": "0.5"}')
