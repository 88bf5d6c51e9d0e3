from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pytest

from sqlboil.queries.helpers import non_zero_default_set, title_case


@dataclass
class Anything:
    id: int = 0
    name: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class TitledFields:
    ID: int = 0
    CreatedAt: Optional[datetime] = None


NOW = datetime.now()


@pytest.mark.parametrize(
    "defaults, obj, expected",
    [
        (["id"], Anything(name="hi"), []),
        (["id"], Anything(id=5, name="hi"), ["id"]),
        ([], Anything(id=5, name="hi"), []),
        (["id", "created_at", "updated_at"], Anything(id=5, name="hi"), ["id"]),
        (
            ["id", "created_at", "updated_at"],
            Anything(id=5, name="hi", created_at=NOW, updated_at=datetime.now()),
            ["id", "created_at", "updated_at"],
        ),
    ],
)
def test_non_zero_default_set(defaults, obj, expected):
    assert non_zero_default_set(defaults, obj) == expected


def test_non_zero_default_set_title_cased_fields():
    obj = TitledFields(ID=5)
    assert non_zero_default_set(["id", "created_at"], obj) == ["id"]


def test_non_zero_default_set_missing_field():
    with pytest.raises(AttributeError):
        non_zero_default_set(["missing"], Anything())


@pytest.mark.parametrize(
    "name, expected",
    [
        ("id", "ID"),
        ("created_at", "CreatedAt"),
        ("updated_at", "UpdatedAt"),
        ("head_size", "HeadSize"),
    ],
)
def test_title_case(name, expected):
    assert title_case(name) == expected