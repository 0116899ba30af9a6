import pytest

from html_uglify.lookup import CLASS, ID, LookupTable, PointerResolver
from html_uglify.names import NameSequence


@pytest.fixture
def lookups():
    return LookupTable()


@pytest.fixture
def resolver():
    return PointerResolver([], {ID: NameSequence(), CLASS: NameSequence()})
