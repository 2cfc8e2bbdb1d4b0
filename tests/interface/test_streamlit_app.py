"""Tests for the Streamlit ledger page."""

from contextlib import nullcontext
from decimal import Decimal
import sys
import types
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.application.ports.finance_records import (
    RecordsUnavailableError,
    RecordsWriteError,
)
from src.application.use_cases import add_record as add_record_module
from src.application.use_cases.get_transaction_ledger import (
    GetTransactionLedgerUseCase,
)
from src.domain.models.ledger import SortDirection
from src.domain.models.transactions import (
    Direction,
    Transaction,
    TransactionType,
)
from src.domain.services.validation import RecordValidationError
from src.infrastructure.settings import LedgerSettings


class _FakeColumn:
    def __init__(self, owner: "_FakeStreamlit") -> None:
        self._owner = owner

    def metric(self, label, value, *args, **kwargs):
        self._owner.metrics[label] = value

    def text_input(self, label, value="", **kwargs):
        return self._owner.text_input(label, value, **kwargs)


class _FakeSidebar:
    def __init__(self, clicked: bool) -> None:
        self.clicked = clicked
        self.labels: list[str] = []

    def button(self, label: str) -> bool:
        self.labels.append(label)
        return self.clicked


class _FakeStreamlit:
    def __init__(self, clicked: bool = False, submitted: bool = False):
        self.session_state: dict = {}
        self.sidebar = _FakeSidebar(clicked)
        self.submitted = submitted
        self.inputs: dict[str, str] = {}
        self.metrics: dict[str, str] = {}
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.infos: list[str] = []
        self.captions: list[str] = []
        self.successes: list[str] = []
        self.dataframe_payload = None
        self.config_kwargs = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def columns(self, spec):
        count = spec if isinstance(spec, int) else len(spec)
        return [_FakeColumn(self) for _ in range(count)]

    def metric(self, label, value, *args, **kwargs):
        self.metrics[label] = value

    def text_input(self, label, value="", **kwargs):
        return self.inputs.get(label, value)

    def selectbox(self, label, options, **kwargs):
        return self.inputs.get(label, options[0])

    def expander(self, label):
        return nullcontext()

    def form(self, key, **kwargs):
        return nullcontext()

    def form_submit_button(self, label):
        return self.submitted

    def error(self, text):
        self.errors.append(text)

    def warning(self, text):
        self.warnings.append(text)

    def info(self, text):
        self.infos.append(text)

    def success(self, text):
        self.successes.append(text)

    def caption(self, text):
        self.captions.append(text)

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)


def _transaction(**overrides) -> Transaction:
    values = {
        "id": 1,
        "date": "2024-01-15",
        "description": "Acme Corp",
        "category": "Salary",
        "amount": Decimal("50000"),
        "type": TransactionType.INCOME,
        "direction": Direction.UP,
    }
    values.update(overrides)
    return Transaction(**values)


def test_format_currency_groups_thousands() -> None:
    assert app._format_currency(Decimal("1234567.5"), "₹") == "₹1,234,567.50"
    assert app._format_currency(Decimal("0"), "$") == "$0.00"


def test_ledger_rows_shape_transactions() -> None:
    rows = app._ledger_rows(
        [
            _transaction(),
            _transaction(
                id=2,
                description="Rent",
                category="Fixed",
                amount=Decimal("15000"),
                type=TransactionType.EXPENSE,
                direction=Direction.DOWN,
            ),
        ],
        "₹",
    )

    assert rows[0] == {
        "Date": "2024-01-15",
        "": "▲",
        "Description": "Acme Corp",
        "Category": "Salary",
        "Amount": "₹50,000.00",
        "Type": "Income",
    }
    assert rows[1][""] == "▼"
    assert rows[1]["Type"] == "Expense"


def test_toggle_sort_direction_cycles_through_states(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    assert app._get_sort_direction() is None
    assert app._toggle_sort_direction() is SortDirection.ASC
    assert app._toggle_sort_direction() is SortDirection.DESC
    assert app._toggle_sort_direction() is None
    assert fake_st.session_state[app.SORT_STATE_KEY] is None


def test_build_filter_state_unpacks_month_options() -> None:
    state = app._build_filter_state(
        "  rent ",
        "Expense",
        ["2024"],
        [("01", "January"), ("03", "March")],
        [],
        [],
        ["down"],
    )

    assert state.search == "rent"
    assert state.transaction_type == "expense"
    assert state.months == frozenset({"01", "03"})
    assert state.directions == frozenset({Direction.DOWN})


def test_check_altair_dependencies_reports_incomplete_imports(
    monkeypatch,
) -> None:
    monkeypatch.setitem(
        sys.modules, "numpy", types.SimpleNamespace(ndarray=object)
    )
    monkeypatch.setitem(
        sys.modules, "pandas", types.SimpleNamespace(Timestamp=object)
    )
    assert app._check_altair_dependencies() == (True, None)

    monkeypatch.setitem(sys.modules, "pandas", types.SimpleNamespace())
    ok, message = app._check_altair_dependencies()
    assert ok is False
    assert "pandas" in message

    monkeypatch.setitem(sys.modules, "numpy", types.SimpleNamespace())
    ok, message = app._check_altair_dependencies()
    assert ok is False
    assert "numpy" in message


def _fetch_rows(kind: str) -> list[dict]:
    if kind == "income":
        return [
            {
                "id": 1,
                "year": "2024",
                "month": "1",
                "day": "15",
                "type": "Salary",
                "name": "Acme Corp",
                "amount": 50000,
            }
        ]
    if kind == "expense":
        return [
            {
                "id": 2,
                "year": "2024",
                "month": "01",
                "day": "20",
                "type": "Fixed",
                "category": "Rent",
                "cost": 15000,
            }
        ]
    if kind == "loan":
        raise RecordsUnavailableError(kind, "no such table")
    return []


def _patch_main(monkeypatch, fake_st, filter_state=None):
    repository = MagicMock()
    repository.fetch_records.side_effect = _fetch_rows
    use_case = GetTransactionLedgerUseCase(repository, logger=MagicMock())
    rendered = {}

    def fake_filters(view):
        rendered["options_view"] = view
        return filter_state or app._build_filter_state(
            "", "all", [], [], [], [], []
        )

    def fake_statistics(view, symbol):
        rendered["view"] = view
        rendered["symbol"] = symbol

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_build_ledger_use_case", lambda: use_case)
    monkeypatch.setattr(
        app.LedgerSettings,
        "from_env",
        classmethod(lambda cls: LedgerSettings(currency_symbol="$")),
    )
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())
    monkeypatch.setattr(app, "_render_filters", fake_filters)
    monkeypatch.setattr(app, "_render_statistics", fake_statistics)
    monkeypatch.setattr(
        app, "_render_monthly_chart", lambda view, symbol: None
    )
    monkeypatch.setattr(app, "_render_add_record_form", lambda: None)
    return rendered


def test_main_renders_ledger_table(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    rendered = _patch_main(monkeypatch, fake_st)

    app.main()

    assert fake_st.config_kwargs["layout"] == "wide"
    assert fake_st.sidebar.labels == ["Date ↕"]
    assert fake_st.warnings == ["Loan records could not be loaded."]
    assert rendered["symbol"] == "$"
    assert rendered["view"] is rendered["options_view"]
    rows, kwargs = fake_st.dataframe_payload
    assert [row["Description"] for row in rows] == ["Rent", "Acme Corp"]
    assert rows[0]["Amount"] == "$15,000.00"
    assert kwargs["hide_index"] is True
    assert fake_st.captions == ["2 transactions shown"]


def test_main_applies_filters_and_sort_toggle(monkeypatch) -> None:
    fake_st = _FakeStreamlit(clicked=True)
    filter_state = app._build_filter_state(
        "", "income", [], [], [], [], []
    )
    rendered = _patch_main(monkeypatch, fake_st, filter_state)

    app.main()

    assert fake_st.session_state[app.SORT_STATE_KEY] is SortDirection.ASC
    assert rendered["options_view"].statistics.count == 2
    assert rendered["view"].statistics.count == 1
    rows, _ = fake_st.dataframe_payload
    assert [row["Type"] for row in rows] == ["Income"]


def test_main_shows_info_when_nothing_matches(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    filter_state = app._build_filter_state(
        "no such thing", "all", [], [], [], [], []
    )
    _patch_main(monkeypatch, fake_st, filter_state)

    app.main()

    assert fake_st.dataframe_payload is None
    assert fake_st.infos == ["No transactions match the current filters."]


def test_main_reports_database_errors(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    _patch_main(monkeypatch, fake_st)
    broken = MagicMock()
    broken.load_collections.side_effect = RuntimeError(
        "Missing environment variable: FINANCE_DB_URL"
    )
    monkeypatch.setattr(app, "_build_ledger_use_case", lambda: broken)

    app.main()

    assert fake_st.errors == ["Missing environment variable: FINANCE_DB_URL"]
    assert fake_st.dataframe_payload is None


def test_add_record_form_shows_validation_errors(monkeypatch) -> None:
    fake_st = _FakeStreamlit(submitted=True)
    fake_st.inputs["Record type"] = "expense"
    monkeypatch.setattr(app, "st", fake_st)

    def fake_add(kind, draft):
        assert kind == "expense"
        assert set(draft) >= {"year", "month", "day", "category", "cost"}
        raise RecordValidationError(kind, ["category", "cost"])

    monkeypatch.setattr(app, "_add_record", fake_add)

    app._render_add_record_form()

    assert fake_st.errors == [
        "Invalid expense record: please fill in category, cost"
    ]
    assert fake_st.successes == []


def test_add_record_form_reports_success(monkeypatch) -> None:
    fake_st = _FakeStreamlit(submitted=True)
    fake_st.inputs.update(
        {"Record type": "tax", "Name": "Advance Tax", "Amount": "1200"}
    )
    monkeypatch.setattr(app, "st", fake_st)
    stored = {}
    monkeypatch.setattr(
        app,
        "_add_record",
        lambda kind, draft: stored.update(kind=kind, draft=draft),
    )

    app._render_add_record_form()

    assert stored["kind"] == "tax"
    assert stored["draft"]["name"] == "Advance Tax"
    assert stored["draft"]["amount"] == "1200"
    assert fake_st.successes == ["Tax added successfully!"]


def test_add_record_form_reports_storage_errors(monkeypatch) -> None:
    fake_st = _FakeStreamlit(submitted=True)
    fake_st.inputs.update(
        {"Record type": "tax", "Name": "Advance Tax", "Amount": "1200"}
    )
    monkeypatch.setattr(app, "st", fake_st)
    repository = MagicMock()
    repository.add_record.side_effect = RecordsWriteError(
        "tax", "no such table: tax"
    )
    built_with = {}

    def fake_repository(**kwargs):
        built_with.update(kwargs)
        return repository

    monkeypatch.setattr(
        app, "build_finance_records_repository", fake_repository
    )
    monkeypatch.setattr(add_record_module, "get_app_logger", MagicMock)

    app._render_add_record_form()

    assert built_with == {"create_tables": True}
    repository.add_record.assert_called_once()
    assert fake_st.errors == ["Unable to save tax record: no such table: tax"]
    assert fake_st.successes == []


def test_add_record_form_reports_missing_database_url(monkeypatch) -> None:
    fake_st = _FakeStreamlit(submitted=True)
    fake_st.inputs.update({"Record type": "expense"})
    monkeypatch.setattr(app, "st", fake_st)

    def missing_url(**kwargs):
        raise RuntimeError("Missing environment variable: FINANCE_DB_URL")

    monkeypatch.setattr(app, "build_finance_records_repository", missing_url)

    app._render_add_record_form()

    assert fake_st.errors == ["Missing environment variable: FINANCE_DB_URL"]
