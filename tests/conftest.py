"""Root test configuration: shared pandoc JSON documents and grammar registry"""

import json
import logging
from pathlib import Path

import pytest

from fencelight.core.highlight import DEFAULT_ALIASES, DEFAULT_LANGUAGES, GrammarRegistry


FIXTURES = Path(__file__).parent / "fixtures"


def _make_doc(*blocks: dict, meta: dict = None) -> str:
    """Build a pandoc JSON document string from raw block dicts."""
    return json.dumps({
        "pandoc-api-version": [1, 23, 1],
        "meta": meta or {},
        "blocks": list(blocks),
    })


def _code_block(text: str, *classes: str) -> dict:
    return {"t": "CodeBlock", "c": [["", list(classes), []], text]}


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    return _make_doc


@pytest.fixture(name="code_block")
def code_block_fixture():
    return _code_block


@pytest.fixture(name="kitchen_sink")
def kitchen_sink_fixture() -> str:
    """Document exercising every block and inline kind, with no highlightable code block."""
    return (FIXTURES / "kitchen_sink.json").read_text(encoding="utf-8")


@pytest.fixture(name="registry", scope="session")
def registry_fixture() -> GrammarRegistry:
    return GrammarRegistry.from_names(DEFAULT_LANGUAGES, DEFAULT_ALIASES)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to per-test capture streams once the test is over."""
    yield
    logger = logging.getLogger("fencelight")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
