"""Structure-preserving recursive rewrite of a pandoc AST.

`walk` offers every node to a transformer. A `Replace` result is spliced in
as-is and not descended into; `Decline` walks the node's children in order and
rebuilds the node only if one of them changed, so untouched subtrees keep
their original object identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union

from pydantic import BaseModel

from fencelight.core.ast import Envelope, Node


@dataclass(frozen=True)
class FilterContext:
    """Read-only ambient data handed to transformers; the walker never reads it."""
    format: str = ""
    meta:   dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Replace:
    node: Node


@dataclass(frozen=True)
class Decline:
    pass


DECLINE = Decline()

TransformResult = Union[Replace, Decline]
Transformer = Callable[[Node, FilterContext], TransformResult]


def _walk_value(value: Any, transform: Transformer, context: FilterContext) -> Any:
    """Walk whatever a payload holds: nodes, sequences of them, or records that contain them."""
    if isinstance(value, Node):
        return walk(value, transform, context)
    if isinstance(value, (list, tuple)):
        walked = [_walk_value(v, transform, context) for v in value]
        if all(new is old for new, old in zip(walked, value)):
            return value
        return tuple(walked) if isinstance(value, tuple) else walked
    if isinstance(value, BaseModel):
        updates = {}
        for name in type(value).model_fields:
            old = getattr(value, name)
            new = _walk_value(old, transform, context)
            if new is not old:
                updates[name] = new
        return value.model_copy(update=updates) if updates else value
    return value


def walk(node: Node, transform: Transformer, context: FilterContext) -> Node:
    """Return node with transform applied depth-first; replacements are final."""
    match transform(node, context):
        case Replace(node=replacement):
            return replacement
        case Decline():
            pass
        case other:
            raise TypeError(f"Transformer must return Replace or Decline, got {other!r}")
    if "c" not in type(node).model_fields:
        return node
    payload = _walk_value(node.c, transform, context)
    return node if payload is node.c else node.model_copy(update={"c": payload})


def walk_blocks(blocks: list[Node], transform: Transformer, context: FilterContext) -> list[Node]:
    return [walk(b, transform, context) for b in blocks]


def walk_document(envelope: Envelope, transform: Transformer, context: FilterContext) -> Envelope:
    """Walk the top-level blocks; metadata and api version pass through untouched."""
    blocks = walk_blocks(envelope.blocks, transform, context)
    if all(new is old for new, old in zip(blocks, envelope.blocks)):
        return envelope
    return envelope.model_copy(update={"blocks": blocks})
