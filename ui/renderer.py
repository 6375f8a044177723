"""Gemeinsamer Renderer für die Stundenplan-Anzeige.

Wird von der Textual-App (ui.app) und vom CLI-Befehl ``fetch`` (Rich)
verwendet. Liefert reine Datenstrukturen, keine Widgets.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.calendar import CalendarResponse, ScheduleDay
from models.subject import Subject
from ui.formatting import date_label, subject_class, time_range

NO_DATA_TEXT = "Нет данных."
NO_SUBJECTS_TEXT = "Нет занятий"
FORM_HINT_TEXT = "Укажите вуз, группу и диапазон дат — и получите расписание."


@dataclass(frozen=True)
class SubjectLine:
    time: str
    title: str
    badge: str
    category: str       # lecture / lab / practice
    info: str


@dataclass(frozen=True)
class DaySection:
    date: str
    label: str
    lines: list[SubjectLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class CalendarView:
    title: str
    group_line: str
    days: list[DaySection] = field(default_factory=list)


def subject_info(subject: Subject) -> str:
    """Zeile mit Lehrkraft, Untergruppe und Ort."""
    return (
        f"Преподаватель: {subject.teacher_name or '—'} · "
        f"Подгруппа: {subject.subgroup_label} · "
        f"Корпус {subject.academic_building}, ауд. {subject.auditory_number}"
    )


def render_subject(subject: Subject) -> SubjectLine:
    return SubjectLine(
        time=time_range(subject.time_from, subject.time_to),
        title=subject.subject_name,
        badge=subject.subject_type,
        category=subject_class(subject.subject_type),
        info=subject_info(subject),
    )


def render_day(day: ScheduleDay) -> DaySection:
    return DaySection(
        date=day.date,
        label=date_label(day.date),
        lines=[render_subject(s) for s in day.subjects],
    )


def render_calendar(response: Optional[CalendarResponse]) -> Optional[CalendarView]:
    """Gibt None zurück, wenn keine Antwort vorliegt (Anzeige: "Нет данных.")."""
    if response is None:
        return None
    cal = response.calendar
    return CalendarView(
        title=cal.full_university_name,
        group_line=f"Группа: {cal.group_name}",
        days=[render_day(day) for day in cal.schedule],
    )
