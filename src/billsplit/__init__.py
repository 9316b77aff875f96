from billsplit.models import BillInput, BillItem, BillOutput, PersonalItem, PersonItem, SharedItem
from billsplit.services.split import split_bill
from billsplit.utils.parse import format_date

__all__ = [
    "BillInput",
    "BillItem",
    "BillOutput",
    "PersonItem",
    "PersonalItem",
    "SharedItem",
    "format_date",
    "split_bill",
]
