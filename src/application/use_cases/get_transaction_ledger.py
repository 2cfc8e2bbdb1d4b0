"""Use case to build the combined transaction ledger."""

from src.application.ports.finance_records import (
    FinanceRecordsPort,
    RecordsUnavailableError,
)
from src.domain.models.ledger import (
    FilterState,
    SortDirection,
    TransactionLedgerView,
)
from src.domain.models.records import RECORD_TYPES, RecordCollections
from src.domain.services.facets import enumerate_facets
from src.domain.services.filtering import filter_transactions
from src.domain.services.sorting import sort_transactions
from src.domain.services.statistics import (
    compute_transaction_statistics,
    split_by_direction,
    summarize_by_month,
)
from src.domain.services.transactions import normalize_records
from src.infrastructure.logging.logger import get_app_logger


class GetTransactionLedgerUseCase:
    """Normalize, filter, sort and summarize all finance records."""

    def __init__(
        self,
        records_repository: FinanceRecordsPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing the raw record collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()

    def load_collections(self) -> tuple[RecordCollections, tuple[str, ...]]:
        """Fetch every record source.

        A source that fails to load is treated as absent.

        Returns:
            tuple: Typed collections and the names of unavailable sources.
        """
        raw: dict[str, list | None] = {}
        unavailable: list[str] = []
        for kind in RECORD_TYPES:
            try:
                raw[kind] = list(self._records_repository.fetch_records(kind))
            except RecordsUnavailableError as exc:
                self._logger.warning(str(exc))
                raw[kind] = None
                unavailable.append(kind)
        return RecordCollections.from_mapping(raw), tuple(unavailable)

    def execute(
        self,
        filter_state: FilterState | None = None,
        sort_direction: SortDirection | None = None,
    ) -> TransactionLedgerView:
        """Fetch fresh records and return the ledger view.

        Args:
            filter_state: Active facets; None applies no filter.
            sort_direction: Date sort toggle state; None is newest first.

        Returns:
            TransactionLedgerView: Rows, statistics and filter options.
        """
        collections, unavailable = self.load_collections()
        return self.build_view(
            collections,
            filter_state=filter_state,
            sort_direction=sort_direction,
            unavailable_sources=unavailable,
        )

    def build_view(
        self,
        collections: RecordCollections,
        filter_state: FilterState | None = None,
        sort_direction: SortDirection | None = None,
        unavailable_sources: tuple[str, ...] = (),
    ) -> TransactionLedgerView:
        """Return the filtered, sorted ledger with statistics and facets.

        Facets are enumerated from the unfiltered ledger.

        Args:
            collections: Raw record collections snapshot.
            filter_state: Active facets; None applies no filter.
            sort_direction: Date sort toggle state; None is newest first.
            unavailable_sources: Sources that failed to load.

        Returns:
            TransactionLedgerView: Rows, statistics and filter options.
        """
        state = filter_state or FilterState()
        transactions = normalize_records(collections, logger=self._logger)
        facets = enumerate_facets(transactions)
        filtered = filter_transactions(transactions, state)
        ordered = sort_transactions(filtered, sort_direction)
        statistics = compute_transaction_statistics(ordered)
        self._logger.info(
            f"Ledger built: {len(transactions)} transactions, "
            f"{statistics.count} shown, total={statistics.total}"
        )
        return TransactionLedgerView(
            transactions=ordered,
            statistics=statistics,
            facets=facets,
            totals=split_by_direction(ordered),
            monthly_flows=summarize_by_month(ordered),
            unavailable_sources=unavailable_sources,
        )


__all__ = ["GetTransactionLedgerUseCase", "TransactionLedgerView"]
