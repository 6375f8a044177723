"""Reine Formatierungsfunktionen für Datum, Uhrzeit und Veranstaltungstyp.

Wird vom API-Client (Backend-Datumsformat), vom Renderer und vom
CLI-Befehl ``fetch`` verwendet.
"""

from datetime import date

from babel.dates import format_date

# Locale für Tagesüberschriften
LABEL_LOCALE = "ru_RU"
LABEL_PATTERN = "EEEE, d MMMM"

TIME_RANGE_SEPARATOR = "–"

# Teilstrings im Veranstaltungstyp, geprüft in dieser Reihenfolge
_LECTURE_FRAGMENT = "лекц"
_LAB_FRAGMENT = "лаб"


def format_date_for_backend(iso_date: str, end_of_day: bool = False) -> str:
    """Wandelt "YYYY-MM-DD" in "YYYY-MM-DD HH:MM:SS" (Tagesbeginn bzw. -ende) um."""
    return f"{iso_date} {'23:59:59' if end_of_day else '00:00:00'}"


def time_range(time_from: str, time_to: str) -> str:
    """Kürzt beide Uhrzeiten auf HH:MM, z.B. "08:00–09:30"."""
    return f"{time_from[:5]}{TIME_RANGE_SEPARATOR}{time_to[:5]}"


def subject_class(subject_type: str) -> str:
    """Ordnet einen Veranstaltungstyp einer Anzeige-Kategorie zu.

    Reihenfolge: Vorlesung vor Labor; alles andere (Seminare, Übungen,
    Unbekanntes) ist "practice".
    """
    s = subject_type.lower()
    if _LECTURE_FRAGMENT in s:
        return "lecture"
    if _LAB_FRAGMENT in s:
        return "lab"
    return "practice"


def date_label(iso_date: str) -> str:
    """Tagesüberschrift wie "Среда, 1 мая".

    Das ISO-Datum wird als reines Kalenderdatum gelesen, die lokale
    Zeitzone spielt keine Rolle.
    """
    parsed = date.fromisoformat(iso_date)
    label = format_date(parsed, LABEL_PATTERN, locale=LABEL_LOCALE)
    return label[:1].upper() + label[1:]
