"""Calendar abstractions for determining today's date."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Calendar(Protocol):
    """Source of the current calendar date."""

    def today(self) -> str:
        """Return today's date as an ISO string."""


@dataclass
class SystemCalendar(Calendar):
    """Calendar backed by the system clock in a given timezone."""

    timezone_name: str = "UTC"

    def today(self) -> str:
        """Return today's ISO date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date().isoformat()


@dataclass
class FixedCalendar(Calendar):
    """Calendar pinned to a single date."""

    date: str

    def today(self) -> str:
        """Return the pinned date."""
        return self.date
