"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from src.domain.constants import DEFAULT_SINGLE_COLUMN_THRESHOLD
from src.domain.policies.settlement import (
    ALL_ACTIVE,
    UNEQUAL_NET_WEIGHT,
)
from src.infrastructure.logging.logger import get_app_logger

SUPPORTED_SETTLEMENT_POLICIES = (UNEQUAL_NET_WEIGHT, ALL_ACTIVE)


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for ledger behaviour that may vary per deployment.

    Attributes:
        settlement_policy: Name of the rollover removal policy.
        single_column_threshold: Row count above which the current entries
            report switches to a single column.
    """

    settlement_policy: str = UNEQUAL_NET_WEIGHT
    single_column_threshold: int = DEFAULT_SINGLE_COLUMN_THRESHOLD

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Unknown or malformed values fall back to the defaults with a
        warning.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        policy = (
            os.getenv("SETTLEMENT_POLICY", UNEQUAL_NET_WEIGHT).strip().lower()
        )
        if policy not in SUPPORTED_SETTLEMENT_POLICIES:
            logger.warning(
                f"Unknown SETTLEMENT_POLICY '{policy}', "
                f"using {UNEQUAL_NET_WEIGHT}"
            )
            policy = UNEQUAL_NET_WEIGHT
        threshold = cls._parse_threshold(
            os.getenv("REPORT_SINGLE_COLUMN_THRESHOLD"),
            logger=logger,
        )
        return cls(settlement_policy=policy, single_column_threshold=threshold)

    @staticmethod
    def _parse_threshold(raw_value: str | None, logger) -> int:
        """Parse the single-column threshold.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Positive threshold or the default.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_SINGLE_COLUMN_THRESHOLD
        try:
            value = int(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid REPORT_SINGLE_COLUMN_THRESHOLD '{raw_value}', "
                f"using {DEFAULT_SINGLE_COLUMN_THRESHOLD}"
            )
            return DEFAULT_SINGLE_COLUMN_THRESHOLD
        if value <= 0:
            logger.warning(
                "REPORT_SINGLE_COLUMN_THRESHOLD must be positive, "
                f"using {DEFAULT_SINGLE_COLUMN_THRESHOLD}"
            )
            return DEFAULT_SINGLE_COLUMN_THRESHOLD
        return value


__all__ = ["LedgerSettings", "SUPPORTED_SETTLEMENT_POLICIES"]
