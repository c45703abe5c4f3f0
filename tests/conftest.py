"""Pytest configuration and shared fixtures."""
import pytest

from json_schema_builder.fields import Field, FieldKind
from json_schema_builder.store import FieldTreeStore


@pytest.fixture
def store():
    return FieldTreeStore()


@pytest.fixture
def sample_forest():
    """Two root fields: 'user' (nested: name, address(nested: city)) and 'count'."""
    city = Field(id="c1", name="city")
    address = Field(id="a1", name="address", kind=FieldKind.NESTED, children=(city,))
    name = Field(id="n1", name="name")
    user = Field(id="u1", name="user", kind=FieldKind.NESTED, children=(name, address))
    count = Field(id="k1", name="count", kind=FieldKind.NUMBER)
    return (user, count)
