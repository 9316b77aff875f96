from __future__ import annotations

from dataclasses import replace
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence, Union

from billsplit.logging import get_logger
from billsplit.models import BillInput, BillItem, BillOutput, PersonalItem, PersonItem, SharedItem
from billsplit.utils.parse import DATE_TEMPLATE, format_date

Number = Union[Decimal, int, float, str]

TENTH = Decimal("0.1")
CENT = Decimal("0.01")
# Residuals below this are float noise from callers, not drift.
RESIDUAL_THRESHOLD = CENT

log = get_logger(__name__)


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps 0.15 as fifteen hundredths instead of its binary expansion
    return Decimal(str(value))


def round_to(value: Number, unit: Decimal) -> Decimal:
    """Round half away from zero to a multiple of ``unit``."""
    return to_decimal(value).quantize(unit, rounding=ROUND_HALF_UP)


def calculate_subtotal(items: Sequence[BillItem]) -> Decimal:
    return sum((to_decimal(item.price) for item in items), Decimal(0))


def calculate_tip(subtotal: Number, tip_percentage: Number) -> Decimal:
    return round_to(to_decimal(subtotal) * to_decimal(tip_percentage) / 100, TENTH)


def scan_participants(items: Sequence[BillItem]) -> list[str]:
    persons: dict[str, None] = {}
    for item in items:
        if not isinstance(item, PersonalItem):
            continue
        if not item.person:
            raise ValueError(f"personal item {item.name!r} must name a person")
        persons.setdefault(item.person, None)
    return list(persons)


def calculate_person_amount(
    items: Sequence[BillItem],
    tip_percentage: Number,
    name: str,
    persons: int,
) -> Decimal:
    if persons <= 0:
        raise ValueError("persons must be positive")

    divisor = Decimal(persons)
    total = Decimal(0)
    for item in items:
        if isinstance(item, SharedItem):
            total += to_decimal(item.price) / divisor
        elif item.person == name:
            total += to_decimal(item.price)

    individual_tip = total * to_decimal(tip_percentage) / 100
    return round_to(total + individual_tip, TENTH)


def calculate_items(items: Sequence[BillItem], tip_percentage: Number) -> list[PersonItem]:
    names = scan_participants(items)
    persons = len(names)
    if persons == 0:
        return []

    return [
        PersonItem(
            name=name,
            amount=calculate_person_amount(items, tip_percentage, name, persons),
        )
        for name in names
    ]


def adjust_amounts(total_amount: Number, items: Sequence[PersonItem]) -> list[PersonItem]:
    """
    Push the rounding residual onto the first participant.

    Per-person amounts are rounded one by one, so their sum may drift from the
    rounded total by a few tenths. The whole residual goes to ``items[0]``,
    which is then re-rounded to 0.1. If the total itself carries cents (prices
    below 0.1 precision), the first amount stays at cent precision so the
    amounts still add up to the total exactly.
    """
    adjusted = list(items)
    if not adjusted:
        return adjusted

    total = to_decimal(total_amount)
    residual = total - sum((item.amount for item in adjusted), Decimal(0))
    if abs(residual) < RESIDUAL_THRESHOLD:
        return adjusted

    first = adjusted[0]
    exact = first.amount + residual
    amount = round_to(exact, TENTH)
    if amount != exact:
        log.warning("bill.reconcile.cents", person=first.name, amount=str(exact))
        amount = round_to(exact, CENT)

    log.debug("bill.reconcile", person=first.name, residual=str(residual))
    adjusted[0] = replace(first, amount=amount)
    return adjusted


def split_bill(bill: BillInput, *, date_template: str = DATE_TEMPLATE) -> BillOutput:
    date = format_date(bill.date, date_template)
    subtotal = calculate_subtotal(bill.items)
    tip = calculate_tip(subtotal, bill.tip_percentage)
    total_amount = round_to(subtotal + tip, CENT)

    items = calculate_items(bill.items, bill.tip_percentage)
    items = adjust_amounts(total_amount, items)

    log.info(
        "bill.split",
        location=bill.location,
        items=len(bill.items),
        participants=len(items),
        total_amount=str(total_amount),
    )

    return BillOutput(
        date=date,
        location=bill.location,
        sub_total=round_to(subtotal, CENT),
        tip=tip,
        total_amount=total_amount,
        items=items,
    )
