from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence, Union


@dataclass(slots=True, frozen=True)
class SharedItem:
    name: str
    price: Decimal


@dataclass(slots=True, frozen=True)
class PersonalItem:
    name: str
    price: Decimal
    person: str


BillItem = Union[SharedItem, PersonalItem]


@dataclass(slots=True, frozen=True)
class BillInput:
    date: str
    location: str
    tip_percentage: Decimal
    items: Sequence[BillItem] = field(default_factory=tuple)


@dataclass(slots=True, frozen=True)
class PersonItem:
    name: str
    amount: Decimal


@dataclass(slots=True, frozen=True)
class BillOutput:
    date: str
    location: str
    sub_total: Decimal
    tip: Decimal
    total_amount: Decimal
    items: list[PersonItem]
