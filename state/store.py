"""Persistenter Formular-Zustand.

Eine kleine JSON-Datei dient als lokaler Key-Value-Speicher; das Formular
liegt unter dem festen Schlüssel ``schedule-form`` und wird bei jeder
Änderung vollständig überschrieben.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from models.form_state import FormState

logger = logging.getLogger(__name__)

FORM_KEY = "schedule-form"


class FormStore:
    DEFAULT_PATH = Path("state") / "local_storage.json"

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else self.DEFAULT_PATH

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Speicherdatei nicht lesbar ({self.path}): {e}")
            return {}
        return raw if isinstance(raw, dict) else {}

    def _write_all(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def load(self, today: Optional[date] = None) -> FormState:
        """Liest das gespeicherte Formular; fehlt es oder ist es ungültig → Default."""
        stored = self._read_all().get(FORM_KEY)
        if stored is None:
            return FormState.default(today)
        try:
            return FormState.model_validate(stored)
        except ValidationError as e:
            logger.warning(f"Gespeichertes Formular ungültig, verwende Default: {e}")
            return FormState.default(today)

    def save(self, form: FormState) -> None:
        """Schreibt das vollständige Formular (überschreibt den alten Wert)."""
        data = self._read_all()
        data[FORM_KEY] = form.model_dump()
        self._write_all(data)
        logger.debug(f"Formular gespeichert: {self.path}")

    def clear(self) -> None:
        """Entfernt das gespeicherte Formular."""
        data = self._read_all()
        if data.pop(FORM_KEY, None) is not None:
            self._write_all(data)
