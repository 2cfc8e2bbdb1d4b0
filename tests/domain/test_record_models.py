"""Tests for raw record models."""

from src.domain.models import (
    IncomeRecord,
    InterestRecord,
    InvestmentRecord,
    RecordCollections,
)


def test_interest_credit_flag_is_decoded_to_bool() -> None:
    """The integer credit_in column becomes a boolean."""
    assert InterestRecord.from_mapping({"credit_in": 1}).credit is True
    assert InterestRecord.from_mapping({"credit_in": 0}).credit is False
    assert InterestRecord.from_mapping({"credit_in": "1"}).credit is True
    assert InterestRecord.from_mapping({"credit_in": "no"}).credit is False
    assert InterestRecord.from_mapping({}).credit is False


def test_from_mapping_stringifies_date_parts() -> None:
    record = IncomeRecord.from_mapping(
        {"year": 2024, "month": 3, "day": 9, "salary": 10}
    )

    assert (record.year, record.month, record.day) == ("2024", "3", "9")
    assert record.is_legacy is True


def test_collections_keep_absent_and_empty_apart() -> None:
    """Missing keys stay None while empty lists become empty tuples."""
    existing = InvestmentRecord(name="Gold", cost=5)
    collections = RecordCollections.from_mapping(
        {"expense": [], "investment": [existing]}
    )

    assert collections.income is None
    assert collections.expense == ()
    assert collections.investment == (existing,)
    assert [kind for kind, _ in collections.items()] == [
        "income",
        "expense",
        "investment",
        "loan",
        "interest",
        "tax",
    ]
