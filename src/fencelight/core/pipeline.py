"""Filter orchestration: decode -> walk -> encode"""

from fencelight.core.codec import decode, encode
from fencelight.core.highlight import GrammarRegistry, Highlighter
from fencelight.core.transform import CodeBlockHighlighter
from fencelight.core.walk import FilterContext, walk_document


def run_filter(raw: bytes | str, fmt: str, registry: GrammarRegistry) -> bytes:
    """Highlight every eligible code block in a pandoc JSON document and return the new JSON.

    Raises MalformedInputError before anything is produced if raw is not a
    pandoc document.
    """
    envelope = decode(raw)
    context = FilterContext(format=fmt, meta=envelope.meta)
    transform = CodeBlockHighlighter(Highlighter(registry))
    return encode(walk_document(envelope, transform, context))
