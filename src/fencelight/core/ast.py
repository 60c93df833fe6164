"""Pandoc JSON AST: one frozen pydantic model per node kind, keyed on the `t` tag"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, model_serializer, model_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class Node(_Frozen):
    """Base for every Block and Inline kind. `t` is the kind, `c` the payload (if any)."""


class Attr(_Frozen):
    """Element attributes, encoded by pandoc as [identifier, [classes], [[key, value]]]."""
    identifier: str = ""
    classes:    list[str] = []
    attributes: list[tuple[str, str]] = []

    @model_validator(mode="before")
    @classmethod
    def from_triple(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise ValueError(f"Attr expects 3 elements, got {len(data)}")
            identifier, classes, attributes = data
            return {"identifier": identifier, "classes": classes, "attributes": attributes}
        return data

    @model_serializer
    def to_triple(self) -> list:
        return [self.identifier, list(self.classes), [list(kv) for kv in self.attributes]]


# --- enumeration tags ({"t": "..."} with no payload) ---

class Alignment(_Frozen):
    t: Literal["AlignLeft", "AlignRight", "AlignCenter", "AlignDefault"]


class QuoteType(_Frozen):
    t: Literal["SingleQuote", "DoubleQuote"]


class MathType(_Frozen):
    t: Literal["DisplayMath", "InlineMath"]


class ListNumberStyle(_Frozen):
    t: Literal["DefaultStyle", "Example", "Decimal", "LowerRoman", "UpperRoman", "LowerAlpha", "UpperAlpha"]


class ListNumberDelim(_Frozen):
    t: Literal["DefaultDelim", "Period", "OneParen", "TwoParens"]


class CitationMode(_Frozen):
    t: Literal["AuthorInText", "SuppressAuthor", "NormalCitation"]


class ColWidth(_Frozen):
    t: Literal["ColWidth"] = "ColWidth"
    c: Union[StrictInt, StrictFloat]


class ColWidthDefault(_Frozen):
    t: Literal["ColWidthDefault"] = "ColWidthDefault"


ColWidthSpec = Annotated[Union[ColWidth, ColWidthDefault], Field(discriminator="t")]


class Citation(_Frozen):
    """A single citation inside a Cite inline; pandoc encodes it as a camelCase object."""
    id:       str = Field(alias="citationId")
    prefix:   list[Inline] = Field(alias="citationPrefix")
    suffix:   list[Inline] = Field(alias="citationSuffix")
    mode:     CitationMode = Field(alias="citationMode")
    note_num: StrictInt = Field(alias="citationNoteNum")
    hash:     StrictInt = Field(alias="citationHash")


# --- inlines ---

class Str(Node):
    t: Literal["Str"] = "Str"
    c: str


class Emph(Node):
    t: Literal["Emph"] = "Emph"
    c: list[Inline]


class Underline(Node):
    t: Literal["Underline"] = "Underline"
    c: list[Inline]


class Strong(Node):
    t: Literal["Strong"] = "Strong"
    c: list[Inline]


class Strikeout(Node):
    t: Literal["Strikeout"] = "Strikeout"
    c: list[Inline]


class Superscript(Node):
    t: Literal["Superscript"] = "Superscript"
    c: list[Inline]


class Subscript(Node):
    t: Literal["Subscript"] = "Subscript"
    c: list[Inline]


class SmallCaps(Node):
    t: Literal["SmallCaps"] = "SmallCaps"
    c: list[Inline]


class Quoted(Node):
    t: Literal["Quoted"] = "Quoted"
    c: tuple[QuoteType, list[Inline]]


class Cite(Node):
    t: Literal["Cite"] = "Cite"
    c: tuple[list[Citation], list[Inline]]


class Code(Node):
    t: Literal["Code"] = "Code"
    c: tuple[Attr, str]


class Space(Node):
    t: Literal["Space"] = "Space"


class SoftBreak(Node):
    t: Literal["SoftBreak"] = "SoftBreak"


class LineBreak(Node):
    t: Literal["LineBreak"] = "LineBreak"


class Math(Node):
    t: Literal["Math"] = "Math"
    c: tuple[MathType, str]


class RawInline(Node):
    t: Literal["RawInline"] = "RawInline"
    c: tuple[str, str]


class Link(Node):
    t: Literal["Link"] = "Link"
    c: tuple[Attr, list[Inline], tuple[str, str]]   # target = (url, title)


class Image(Node):
    t: Literal["Image"] = "Image"
    c: tuple[Attr, list[Inline], tuple[str, str]]


class Note(Node):
    t: Literal["Note"] = "Note"
    c: list[Block]


class Span(Node):
    t: Literal["Span"] = "Span"
    c: tuple[Attr, list[Inline]]


Inline = Annotated[
    Union[
        Str, Emph, Underline, Strong, Strikeout, Superscript, Subscript, SmallCaps,
        Quoted, Cite, Code, Space, SoftBreak, LineBreak, Math, RawInline, Link, Image,
        Note, Span,
    ],
    Field(discriminator="t"),
]


# --- table pieces (positional arrays in pandoc JSON) ---

Caption   = tuple[Optional[list[Inline]], list["Block"]]        # (short caption, body)
ColSpec   = tuple[Alignment, ColWidthSpec]
Cell      = tuple[Attr, Alignment, StrictInt, StrictInt, list["Block"]]     # attr, align, row span, col span, body
Row       = tuple[Attr, list[Cell]]
TableHead = tuple[Attr, list[Row]]
TableBody = tuple[Attr, StrictInt, list[Row], list[Row]]              # attr, row head columns, head, body
TableFoot = tuple[Attr, list[Row]]
ListAttributes = tuple[StrictInt, ListNumberStyle, ListNumberDelim]   # start number, style, delimiter


# --- blocks ---

class Plain(Node):
    t: Literal["Plain"] = "Plain"
    c: list[Inline]


class Para(Node):
    t: Literal["Para"] = "Para"
    c: list[Inline]


class LineBlock(Node):
    t: Literal["LineBlock"] = "LineBlock"
    c: list[list[Inline]]


class CodeBlock(Node):
    t: Literal["CodeBlock"] = "CodeBlock"
    c: tuple[Attr, str]


class RawBlock(Node):
    t: Literal["RawBlock"] = "RawBlock"
    c: tuple[str, str]


class BlockQuote(Node):
    t: Literal["BlockQuote"] = "BlockQuote"
    c: list[Block]


class OrderedList(Node):
    t: Literal["OrderedList"] = "OrderedList"
    c: tuple[ListAttributes, list[list[Block]]]


class BulletList(Node):
    t: Literal["BulletList"] = "BulletList"
    c: list[list[Block]]


class DefinitionList(Node):
    t: Literal["DefinitionList"] = "DefinitionList"
    c: list[tuple[list[Inline], list[list[Block]]]]


class Header(Node):
    t: Literal["Header"] = "Header"
    c: tuple[StrictInt, Attr, list[Inline]]


class HorizontalRule(Node):
    t: Literal["HorizontalRule"] = "HorizontalRule"


class Table(Node):
    t: Literal["Table"] = "Table"
    c: tuple[Attr, Caption, list[ColSpec], TableHead, list[TableBody], TableFoot]


class Figure(Node):
    t: Literal["Figure"] = "Figure"
    c: tuple[Attr, Caption, list[Block]]


class Div(Node):
    t: Literal["Div"] = "Div"
    c: tuple[Attr, list[Block]]


class Null(Node):
    """Removed in pandoc-types 1.23; still accepted from older pandoc releases."""
    t: Literal["Null"] = "Null"


Block = Annotated[
    Union[
        Plain, Para, LineBlock, CodeBlock, RawBlock, BlockQuote, OrderedList, BulletList,
        DefinitionList, Header, HorizontalRule, Table, Figure, Div, Null,
    ],
    Field(discriminator="t"),
]


class Envelope(_Frozen):
    """Top-level pandoc document: api version, opaque metadata, and the block sequence."""
    api_version: list[StrictInt] = Field(alias="pandoc-api-version")
    meta:        dict[str, Any]
    blocks:      list[Block]


for _model in (
    Citation, Emph, Underline, Strong, Strikeout, Superscript, Subscript, SmallCaps, Quoted,
    Cite, Link, Image, Note, Span, Plain, Para, LineBlock, BlockQuote, OrderedList, BulletList,
    DefinitionList, Header, Table, Figure, Div, Envelope,
):
    _model.model_rebuild()
