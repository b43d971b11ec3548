"""The rozmarra calculators.

Each one is an independent pure function; none of them uses another.
"""

from services.auction import AuctionSummary, summarize_auction
from services.form import FormResult, validate_form
from services.order import Bill, LineItem, build_order
from services.report_card import ReportCard, build_report_card
from services.title import normalize_title
from services.transactions import TransactionAnalysis, analyze_transactions

__all__ = [
    "AuctionSummary",
    "Bill",
    "FormResult",
    "LineItem",
    "ReportCard",
    "TransactionAnalysis",
    "analyze_transactions",
    "build_order",
    "build_report_card",
    "normalize_title",
    "summarize_auction",
    "validate_form",
]
