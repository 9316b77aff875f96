from billsplit.services.split import split_bill
from billsplit.services.summary import format_summary

__all__ = ["format_summary", "split_bill"]
