import re

import pytest

from gql_scalagen.core.parser import parse_schema
from gql_scalagen.core.writer import SchemaWriter

_PUNCTUATION = re.compile(r"\s*([(){}\[\],:])\s*")


def _squash(text: str) -> str:
    """Collapse whitespace so raw output can be compared token-wise."""
    return _PUNCTUATION.sub(r"\1", " ".join(text.split()))


@pytest.fixture
def squash():
    return _squash


@pytest.fixture
def writer() -> SchemaWriter:
    return SchemaWriter()


@pytest.fixture
def gen(writer):
    """Parse SDL text and write it with the default writer."""
    def _gen(sdl: str, effect: str | None = None) -> str:
        return writer.write(parse_schema(sdl), effect)
    return _gen
