"""Domain constants for the transaction ledger."""

ALL_TYPES = "all"

TRANSACTION_TYPES = (
    "income",
    "expense",
    "investment",
    "loan",
    "interest",
    "tax",
)

TYPE_OPTIONS = (ALL_TYPES, *TRANSACTION_TYPES)

MONTH_OPTIONS = (
    ("01", "January"),
    ("02", "February"),
    ("03", "March"),
    ("04", "April"),
    ("05", "May"),
    ("06", "June"),
    ("07", "July"),
    ("08", "August"),
    ("09", "September"),
    ("10", "October"),
    ("11", "November"),
    ("12", "December"),
)

# Substituted for dates whose year, month or day is absent or invalid.
UNKNOWN_DATE = "1970-01-01"


__all__ = [
    "ALL_TYPES",
    "TRANSACTION_TYPES",
    "TYPE_OPTIONS",
    "MONTH_OPTIONS",
    "UNKNOWN_DATE",
]
