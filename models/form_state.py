"""Formular-Zustand und Ansichts-Zustand des Clients."""

from datetime import date, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel

# Standard-Datumsbereich: heute bis heute + 6 Tage
DEFAULT_RANGE_DAYS = 6


class ViewState(str, Enum):
    FORM = "form"
    SCHEDULE = "schedule"


class FormState(BaseModel):
    """Die Abfrage, die der Nutzer gerade zusammenstellt.

    Wird bei jeder Änderung persistiert (siehe state.store.FormStore).
    Datumswerte sind ISO-Strings, der Bereich ist inklusiv.
    """

    full_university_name: str = ""
    group_name: str = ""
    date_from: str = ""
    date_to: str = ""

    @classmethod
    def default(cls, today: Optional[date] = None) -> "FormState":
        """Leeres Formular mit Datumsbereich heute .. heute+6 Tage."""
        today = today or date.today()
        return cls(
            date_from=today.isoformat(),
            date_to=(today + timedelta(days=DEFAULT_RANGE_DAYS)).isoformat(),
        )

    @property
    def is_valid(self) -> bool:
        """Validierungs-Gate für das Absenden."""
        return (
            len(self.full_university_name.strip()) > 1
            and len(self.group_name.strip()) > 0
            and bool(self.date_from)
            and bool(self.date_to)
        )
