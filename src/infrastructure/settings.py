"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger


DEFAULT_FETCH_LIMIT = 100
DEFAULT_CURRENCY_SYMBOL = "₹"


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for loading and displaying the ledger.

    Attributes:
        fetch_limit: Maximum rows read per record source (0 = no limit).
        currency_symbol: Symbol used when formatting amounts.
    """

    fetch_limit: int = DEFAULT_FETCH_LIMIT
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        fetch_limit = cls._parse_limit(
            os.getenv("LEDGER_FETCH_LIMIT"),
            logger=logger,
        )
        symbol = (
            os.getenv("LEDGER_CURRENCY_SYMBOL", "").strip()
            or DEFAULT_CURRENCY_SYMBOL
        )
        return cls(fetch_limit=fetch_limit, currency_symbol=symbol)

    @staticmethod
    def _parse_limit(raw_value: str | None, logger) -> int:
        """Parse the fetch limit, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Non-negative row limit.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_FETCH_LIMIT
        try:
            value = int(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_FETCH_LIMIT '{raw_value}'. "
                f"Using {DEFAULT_FETCH_LIMIT}."
            )
            return DEFAULT_FETCH_LIMIT
        if value < 0:
            logger.warning(
                f"Negative LEDGER_FETCH_LIMIT '{raw_value}'. "
                f"Using {DEFAULT_FETCH_LIMIT}."
            )
            return DEFAULT_FETCH_LIMIT
        return value


__all__ = ["LedgerSettings", "DEFAULT_FETCH_LIMIT", "DEFAULT_CURRENCY_SYMBOL"]
