"""Monthly inflow/outflow chart for the ledger page.

``prepare_monthly_flow_data`` is a pure transformation from the ledger's
``MonthlyFlow`` rows to Altair-ready records; ``build_monthly_flow_chart``
wires those records into a grouped bar chart.
"""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt

from src.domain.models.ledger import MonthlyFlow


INFLOW_LABEL = "Inflow"
OUTFLOW_LABEL = "Outflow"

FLOW_COLORS = {
    INFLOW_LABEL: "#2e7d32",
    OUTFLOW_LABEL: "#e76f51",
}


def _format_amount(value: Decimal, currency_symbol: str) -> str:
    return f"{currency_symbol}{value:,.2f}"


def prepare_monthly_flow_data(
    flows: Sequence[MonthlyFlow],
    currency_symbol: str = "₹",
) -> list[dict[str, str | float]]:
    """Flatten monthly flows into one record per month and direction.

    Args:
        flows: Monthly inflow/outflow totals, oldest first.
        currency_symbol: Symbol used in tooltip labels.

    Returns:
        list[dict[str, str | float]]: Chart records; zero amounts skipped.
    """
    data: list[dict[str, str | float]] = []
    for flow in flows:
        for label, amount in (
            (INFLOW_LABEL, flow.inflow),
            (OUTFLOW_LABEL, flow.outflow),
        ):
            if amount == 0:
                continue
            data.append(
                {
                    "month": flow.month,
                    "flow": label,
                    "amount": float(amount),
                    "amount_label": _format_amount(amount, currency_symbol),
                }
            )
    return data


def build_monthly_flow_chart(
    data: list[dict[str, str | float]],
    height: int = 320,
) -> alt.Chart:
    """Build a grouped bar chart of monthly inflows and outflows."""
    return alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("month:O", title=None),
        xOffset=alt.XOffset("flow:N"),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "flow:N",
            scale=alt.Scale(
                domain=list(FLOW_COLORS),
                range=list(FLOW_COLORS.values()),
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:O"),
            alt.Tooltip("flow:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(height=height)


__all__ = [
    "INFLOW_LABEL",
    "OUTFLOW_LABEL",
    "prepare_monthly_flow_data",
    "build_monthly_flow_chart",
]
