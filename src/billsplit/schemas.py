from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from billsplit.models import BillInput, BillItem, BillOutput, PersonalItem, SharedItem

# Keeps price × tip well inside the 28-digit default Decimal context.
MAX_AMOUNT = Decimal("1e12")


class SharedItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    is_shared: Literal[True] = Field(..., alias="isShared")
    name: str
    price: Decimal = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)

    def to_item(self) -> BillItem:
        return SharedItem(name=self.name, price=self.price)


class PersonalItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    is_shared: Literal[False] = Field(..., alias="isShared")
    name: str
    price: Decimal = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    person: str = Field(..., min_length=1)

    @field_validator("person")
    @classmethod
    def _person_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("person must not be blank")
        return value

    def to_item(self) -> BillItem:
        return PersonalItem(name=self.name, price=self.price, person=self.person)


class BillRequest(BaseModel):
    """Bill as it arrives from a caller, with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    date: str
    location: str = ""
    tip_percentage: Optional[Decimal] = Field(None, alias="tipPercentage", ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    items: list[Union[SharedItemIn, PersonalItemIn]] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def _date_is_calendar_day(cls, value: str) -> str:
        try:
            datetime.strptime(value, "%Y-%m-%d")
        except ValueError as exc:
            raise ValueError("date must be a calendar day in YYYY-MM-DD form") from exc
        return value

    def to_bill_input(self, default_tip_percentage: Decimal = Decimal(0)) -> BillInput:
        tip = self.tip_percentage if self.tip_percentage is not None else default_tip_percentage
        return BillInput(
            date=self.date,
            location=self.location,
            tip_percentage=tip,
            items=tuple(item.to_item() for item in self.items),
        )


class PersonItemOut(BaseModel):
    name: str
    amount: float


class BillResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    location: str
    sub_total: float = Field(..., alias="subTotal")
    tip: float
    total_amount: float = Field(..., alias="totalAmount")
    items: list[PersonItemOut]

    @classmethod
    def from_output(cls, output: BillOutput) -> "BillResponse":
        return cls(
            date=output.date,
            location=output.location,
            sub_total=float(output.sub_total),
            tip=float(output.tip),
            total_amount=float(output.total_amount),
            items=[PersonItemOut(name=item.name, amount=float(item.amount)) for item in output.items],
        )

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)
