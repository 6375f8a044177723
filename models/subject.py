"""Datenmodell für eine einzelne Lehrveranstaltung (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict

# Untergruppe "0" bedeutet: gilt für alle Untergruppen
ALL_SUBGROUPS = "0"


class Subject(BaseModel):
    """Eine Lehrveranstaltung, wie sie die Schedule-API liefert."""

    # Die API liefert Raum- und Untergruppennummern teils als Zahl
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    time_from: str          # "HH:MM:SS"
    time_to: str            # "HH:MM:SS"
    subject_type: str       # Freitext, z.B. "лекция", "лабораторная"
    subject_name: str
    teacher_name: str = ""
    subgroup: str = ALL_SUBGROUPS
    academic_building: str = ""
    auditory_number: str = ""

    @property
    def applies_to_all_subgroups(self) -> bool:
        return self.subgroup == ALL_SUBGROUPS

    @property
    def subgroup_label(self) -> str:
        """Anzeigetext der Untergruppe ("все" für alle)."""
        return "все" if self.applies_to_all_subgroups else self.subgroup

    @property
    def category(self) -> str:
        """Anzeige-Kategorie: lecture / lab / practice."""
        from ui.formatting import subject_class
        return subject_class(self.subject_type)
