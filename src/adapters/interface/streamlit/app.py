"""Streamlit transactions ledger entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
import sys

import streamlit as st

from src.adapters.interface.streamlit.monthly_flow_chart import (
    build_monthly_flow_chart,
    prepare_monthly_flow_data,
)
from src.application.use_cases.add_record import AddRecordUseCase
from src.application.use_cases.get_transaction_ledger import (
    GetTransactionLedgerUseCase,
    TransactionLedgerView,
)
from src.domain.constants import TRANSACTION_TYPES
from src.domain.models.ledger import FilterState, SortDirection
from src.domain.models.transactions import Direction, Transaction
from src.domain.services.sorting import next_sort_direction
from src.domain.services.validation import RecordValidationError
from src.infrastructure.container import build_finance_records_repository
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings


SORT_STATE_KEY = "ledger_sort_direction"

_SORT_LABELS = {
    None: "Date ↕",
    SortDirection.ASC: "Date ↑",
    SortDirection.DESC: "Date ↓",
}

_DIRECTION_ICONS = {
    Direction.UP: "▲",
    Direction.DOWN: "▼",
}

_DRAFT_FIELDS = {
    "income": ("name", "type", "amount"),
    "expense": ("type", "category", "cost"),
    "investment": (
        "type",
        "folio_number",
        "name",
        "type_of_order",
        "units",
        "nav",
        "cost",
    ),
    "loan": (
        "type",
        "name",
        "interest",
        "loan_amount",
        "loan_repayment",
        "cost",
    ),
    "interest": ("type", "name", "cost_in", "cost_out"),
    "tax": ("type", "name", "amount", "refund"),
}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas expose what Altair needs."""
    numpy = sys.modules.get("numpy")
    if numpy is None:
        import numpy
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete; charts are disabled."
    pandas = sys.modules.get("pandas")
    if pandas is None:
        import pandas
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete; charts are disabled."
    return True, None


def _build_ledger_use_case() -> GetTransactionLedgerUseCase:
    """Wire the ledger use case to the configured repository."""
    repository = build_finance_records_repository()
    return GetTransactionLedgerUseCase(records_repository=repository)


def _add_record(kind: str, draft: dict[str, str]) -> dict:
    """Validate and store a record draft."""
    repository = build_finance_records_repository(create_tables=True)
    use_case = AddRecordUseCase(records_repository=repository)
    return use_case.execute(kind, draft)


def _format_currency(value: Decimal, currency_symbol: str) -> str:
    """Format currency values for display."""
    return f"{currency_symbol}{value:,.2f}"


def _get_sort_direction() -> SortDirection | None:
    return st.session_state.get(SORT_STATE_KEY)


def _toggle_sort_direction() -> SortDirection | None:
    """Advance the date sort toggle held in the session state."""
    direction = next_sort_direction(_get_sort_direction())
    st.session_state[SORT_STATE_KEY] = direction
    return direction


def _build_filter_state(
    search: str,
    transaction_type: str,
    years: Sequence[str],
    months: Sequence[tuple[str, str]],
    categories: Sequence[str],
    descriptions: Sequence[str],
    directions: Sequence[str],
) -> FilterState:
    """Convert widget selections into a filter state."""
    return FilterState.create(
        search=search,
        transaction_type=transaction_type,
        years=years,
        months=[value for value, _ in months],
        categories=categories,
        descriptions=descriptions,
        directions=directions,
    )


def _ledger_rows(
    transactions: Sequence[Transaction],
    currency_symbol: str,
) -> list[dict[str, str]]:
    """Shape transactions for the ledger table."""
    return [
        {
            "Date": item.date,
            "": _DIRECTION_ICONS[item.direction],
            "Description": item.description,
            "Category": item.category,
            "Amount": _format_currency(item.amount, currency_symbol),
            "Type": item.type.value.title(),
        }
        for item in transactions
    ]


def _render_filters(view: TransactionLedgerView) -> FilterState:
    """Render the filter widgets and return the selected state."""
    search_col, type_col = st.columns([3, 1])
    search = search_col.text_input(
        "Search",
        placeholder="Description or category",
    )
    transaction_type = type_col.selectbox(
        "Type",
        options=list(view.types),
        format_func=str.title,
        index=0,
    )
    year_col, month_col, direction_col = st.columns(3)
    years = year_col.multiselect(
        "Years",
        options=list(view.facets.years),
    )
    months = month_col.multiselect(
        "Months",
        options=list(view.months),
        format_func=lambda option: option[1],
    )
    directions = direction_col.multiselect(
        "Direction",
        options=[Direction.UP.value, Direction.DOWN.value],
        format_func=lambda value: "Inflow" if value == "up" else "Outflow",
    )
    category_col, description_col = st.columns(2)
    categories = category_col.multiselect(
        "Categories",
        options=list(view.facets.categories),
    )
    descriptions = description_col.multiselect(
        "Descriptions",
        options=list(view.facets.descriptions),
    )
    return _build_filter_state(
        search,
        transaction_type,
        years,
        months,
        categories,
        descriptions,
        directions,
    )


def _render_statistics(
    view: TransactionLedgerView,
    currency_symbol: str,
) -> None:
    """Render the statistics metric row."""
    stats = view.statistics
    cols = st.columns(6)
    cols[0].metric("Transactions", f"{stats.count:,}")
    cols[1].metric("Total", _format_currency(stats.total, currency_symbol))
    cols[2].metric(
        "Average",
        _format_currency(stats.average, currency_symbol),
    )
    cols[3].metric(
        "Monthly Average",
        _format_currency(stats.monthly_average, currency_symbol),
        f"{stats.month_count} months",
        delta_color="off",
    )
    cols[4].metric(
        "Inflow",
        _format_currency(view.totals.inflow, currency_symbol),
    )
    cols[5].metric(
        "Outflow",
        _format_currency(view.totals.outflow, currency_symbol),
    )


def _render_monthly_chart(
    view: TransactionLedgerView,
    currency_symbol: str,
) -> None:
    """Render the monthly inflow/outflow chart."""
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = prepare_monthly_flow_data(view.monthly_flows, currency_symbol)
    if not data:
        st.info("No amounts available for the chart.")
        return
    st.subheader("Monthly Flow")
    st.altair_chart(build_monthly_flow_chart(data), width="stretch")


def _render_add_record_form() -> None:
    """Render the add-record form in an expander."""
    with st.expander("Add transaction"):
        kind = st.selectbox(
            "Record type",
            options=list(TRANSACTION_TYPES),
            format_func=str.title,
            key="add_record_kind",
        )
        with st.form("add_record_form", clear_on_submit=True):
            today = date.today()
            date_cols = st.columns(4)
            draft = {
                "year": date_cols[0].text_input("Year", str(today.year)),
                "month": date_cols[1].text_input(
                    "Month",
                    f"{today.month:02d}",
                ),
                "day": date_cols[2].text_input("Day", f"{today.day:02d}"),
                "financial_year": date_cols[3].text_input(
                    "Financial Year",
                    str(today.year),
                ),
            }
            for field_name in _DRAFT_FIELDS[kind]:
                label = field_name.replace("_", " ").title()
                draft[field_name] = st.text_input(
                    label,
                    key=f"add_{field_name}",
                )
            submitted = st.form_submit_button("Add")
        if not submitted:
            return
        try:
            _add_record(kind, draft)
        except (RecordValidationError, RuntimeError) as exc:
            st.error(str(exc))
            return
        st.success(f"{kind.title()} added successfully!")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Transactions", layout="wide")
    st.title("Transactions")
    settings = LedgerSettings.from_env()
    usage_logger = get_usage_logger()

    sort_direction = _get_sort_direction()
    if st.sidebar.button(_SORT_LABELS[sort_direction]):
        sort_direction = _toggle_sort_direction()
        usage_logger.info(f"Ledger sort toggled to {sort_direction}")

    use_case = _build_ledger_use_case()
    try:
        collections, unavailable = use_case.load_collections()
    except RuntimeError as exc:
        st.error(str(exc))
        return
    options_view = use_case.build_view(
        collections,
        sort_direction=sort_direction,
        unavailable_sources=unavailable,
    )
    filter_state = _render_filters(options_view)
    view = options_view
    if not filter_state.is_empty:
        usage_logger.info(f"Ledger filtered: {filter_state}")
        view = use_case.build_view(
            collections,
            filter_state=filter_state,
            sort_direction=sort_direction,
            unavailable_sources=unavailable,
        )

    for kind in view.unavailable_sources:
        st.warning(f"{kind.title()} records could not be loaded.")

    _render_statistics(view, settings.currency_symbol)
    st.caption(f"{view.statistics.count} transactions shown")
    if not view.transactions:
        st.info("No transactions match the current filters.")
    else:
        st.dataframe(
            _ledger_rows(view.transactions, settings.currency_symbol),
            width="stretch",
            hide_index=True,
            height=480,
        )
        _render_monthly_chart(view, settings.currency_symbol)
    _render_add_record_form()


if __name__ == "__main__":  # pragma: no cover
    main()
