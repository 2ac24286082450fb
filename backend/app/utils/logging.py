"""Structured logging for allowance searches."""

import logging
from datetime import date
from typing import Any

logger = logging.getLogger(__name__)


class StructuredSearchLogger:
    """Structured logger for bounded allowance searches."""

    def log_search(
        self,
        search: str,
        start: date,
        outcome: str,
        iterations: int,
        result: int | date | None = None,
        required_days: int | None = None,
    ) -> None:
        """Log one search call with structured data."""
        log_data: dict[str, Any] = {
            "search": search,
            "start": start.isoformat(),
            "outcome": outcome,
            "iterations": iterations,
            "result": result.isoformat() if isinstance(result, date) else result,
        }

        if required_days is not None:
            log_data["required_days"] = required_days

        log_msg = f"Allowance search: {search} - {outcome}"

        if outcome == "exhausted":
            logger.warning(log_msg, extra={"structured": log_data})
        else:
            logger.info(log_msg, extra={"structured": log_data})


search_logger = StructuredSearchLogger()
