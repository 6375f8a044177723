"""Datenmodell für die Antwort der Schedule-API (Pydantic v2).

Alle Modelle sind unveränderlich; sie stammen vollständig aus der
API-Antwort und gehören exklusiv zur aktuell gehaltenen Antwort.
"""

import re
from datetime import date as _date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.subject import Subject

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class ScheduleDay(BaseModel):
    """Ein Kalendertag mit seinen Veranstaltungen (Reihenfolge wie empfangen)."""

    model_config = ConfigDict(frozen=True)

    # ISO-Datum "YYYY-MM-DD"
    date: str
    subjects: list[Subject] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def _check_iso_date(cls, v: str) -> str:
        if not ISO_DATE_RE.fullmatch(v):
            raise ValueError(f"Datum muss YYYY-MM-DD sein, erhalten: {v!r}")
        _date.fromisoformat(v)
        return v

    @property
    def is_empty(self) -> bool:
        return not self.subjects


class Calendar(BaseModel):
    """Vollständiger Stundenplan einer Gruppe für einen Datumsbereich."""

    model_config = ConfigDict(frozen=True)

    full_university_name: str
    short_university_name: Optional[str] = None
    group_name: str
    # Chronologisch, wie vom Server geliefert
    schedule: list[ScheduleDay] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        """Kurzname der Hochschule, falls vorhanden, sonst der volle Name."""
        return self.short_university_name or self.full_university_name

    @property
    def total_subjects(self) -> int:
        return sum(len(day.subjects) for day in self.schedule)


class CalendarResponse(BaseModel):
    """Erfolgreiche API-Antwort: genau ein Calendar unter dem Schlüssel "calendar"."""

    model_config = ConfigDict(frozen=True)

    calendar: Calendar
