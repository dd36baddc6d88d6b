# tests/conftest.py
import pytest

from pyargo.Config import ParserConfig
from pyargo.Cursor import Cursor
from pyargo.Result import Error, Ok, ParseResult


def assert_result_eq(res1: ParseResult, res2: ParseResult):
    """
    Deep comparison of two ParseResults.
    """
    if isinstance(res1.reply, Ok):
        assert isinstance(res2.reply, Ok), "Reply mismatch: Ok vs Error"
        assert res1.reply.value == res2.reply.value
    else:
        assert isinstance(res2.reply, Error), "Reply mismatch: Error vs Ok"
        assert res1.reply.error.kind == res2.reply.error.kind
        assert res1.reply.error.found == res2.reply.error.found
        assert res1.reply.error.in_key == res2.reply.error.in_key


@pytest.fixture
def cursor():
    def _make(input_data, name="test"):
        return Cursor.from_string(input_data, name)

    return _make


@pytest.fixture
def config():
    return ParserConfig()
