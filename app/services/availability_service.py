"""Availability service for annotating tables with per-window availability."""
import asyncio
import logging
from dataclasses import dataclass
from datetime import date, time as dt_time
from typing import List, Optional, Sequence, Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingWindow:
    """The (date, start, end) tuple an availability answer is valid for.

    ``end_time`` may be earlier than ``start_time`` for overnight sessions.
    """

    booking_date: date
    start_time: dt_time
    end_time: dt_time


@dataclass(frozen=True)
class AvailabilityCheck:
    """Outcome of one availability check: either an answer or an error."""

    table_id: str
    available: Optional[bool] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class TableWithAvailability:
    """A table annotated for a single booking window."""

    table: Any
    is_available: bool

    @property
    def location(self) -> str:
        return self.table.location


class AvailabilityService:
    """Fans out availability checks and reduces them fail-closed."""

    def __init__(self, store):
        self.store = store

    async def annotate(
        self,
        tables: Sequence[Any],
        window: Optional[BookingWindow] = None,
    ) -> List[TableWithAvailability]:
        """
        Annotate tables with availability for a booking window.

        Without a window every table is shown as available. With one, each
        table is checked independently and concurrently; a failed check marks
        only that table unavailable.

        Args:
            tables: Tables to annotate
            window: Booking window, or None for display-only listing

        Returns:
            Annotated tables in the input order
        """
        if window is None:
            return [TableWithAvailability(table=t, is_available=True) for t in tables]

        checks = await asyncio.gather(
            *(self._check(table, window) for table in tables)
        )

        return [
            TableWithAvailability(table=table, is_available=self._reduce(check))
            for table, check in zip(tables, checks)
        ]

    async def _check(self, table: Any, window: BookingWindow) -> AvailabilityCheck:
        table_id = str(table.id)
        try:
            available = await self.store.check_table_availability(
                table_id,
                window.booking_date,
                window.start_time,
                window.end_time,
            )
            return AvailabilityCheck(table_id=table_id, available=available)
        except Exception as e:
            return AvailabilityCheck(table_id=table_id, error=e)

    @staticmethod
    def _reduce(check: AvailabilityCheck) -> bool:
        if not check.ok:
            logger.error(
                f"Availability check failed for table {check.table_id}: {check.error!r}"
            )
            return False
        if check.available is not True:
            if check.available is not False:
                logger.warning(
                    f"Availability check for table {check.table_id} returned "
                    f"{check.available!r}; treating as unavailable"
                )
            return False
        return True


def count_tables(tables: Sequence[TableWithAvailability]) -> dict:
    """Total, per-location and available counts."""
    return {
        "total": len(tables),
        "upstairs": sum(1 for t in tables if t.location == "upstairs"),
        "downstairs": sum(1 for t in tables if t.location == "downstairs"),
        "available": sum(1 for t in tables if t.is_available),
    }
