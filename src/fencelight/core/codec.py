"""Decode pandoc JSON into an Envelope and encode it back"""

import logging

from pydantic import ValidationError

from fencelight.core.ast import Envelope


logger = logging.getLogger(__name__)


class MalformedInputError(ValueError):
    """Input bytes are not a pandoc JSON document this filter can traverse."""


def decode(raw: bytes | str) -> Envelope:
    """Parse the full input buffer into an Envelope; raise MalformedInputError on any mismatch."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Input is not valid UTF-8: {e}") from e
    try:
        envelope = Envelope.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedInputError(
            f"Input is not a pandoc JSON document ({e.error_count()} error(s)): {e.errors()[0]['msg']}"
        ) from e
    logger.debug(
        "Decoded %d top-level block(s), pandoc-api-version %s",
        len(envelope.blocks), ".".join(str(v) for v in envelope.api_version),
    )
    return envelope


def encode(envelope: Envelope) -> bytes:
    """Serialize an Envelope to compact UTF-8 JSON with pandoc's field names."""
    return envelope.model_dump_json(by_alias=True).encode("utf-8")
