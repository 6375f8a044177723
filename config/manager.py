"""Konfigurationsmanager: Laden (YAML + Umgebung) und Speichern.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
import logging
import os
from datetime import date
from pathlib import Path
from typing import Mapping, Optional

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from config.schema import ClientConfig

logger = logging.getLogger(__name__)

yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120

# Umgebungsvariable → Konfigurationsfeld
ENV_OVERRIDES: dict[str, str] = {
    "SCHEDULE_API_URL": "api_url",
    "SCHEDULE_APP_TITLE": "app_title",
    "SCHEDULE_REQUEST_TIMEOUT": "request_timeout",
    "SCHEDULE_STATE_FILE": "state_file",
}

_YAML_HEADER = f"""\
# ============================================
# Stundenplan-Client — Konfiguration
# Erstellt: {date.today().isoformat()}
# Umgebungsvariablen (SCHEDULE_API_URL, ...) haben Vorrang.
# ============================================
"""

_FIELD_COMMENTS = {
    "api_url": "Endpunkt der Schedule-API (POST, JSON)",
    "app_title": "Titel in der Kopfzeile",
    "request_timeout": "Sekunden, 0 = kein Limit",
    "state_file": "Persistenter Formular-Zustand",
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "client_config.yaml"

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self.environ = os.environ if environ is None else environ

    def config_exists(self) -> bool:
        return self.DEFAULT_CONFIG.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> ClientConfig:
        """Lade Config aus YAML (falls vorhanden) und überlagere die Umgebung.

        Fehlt die Datei, gelten die Defaults. Ein fehlender API-Endpunkt ist
        hier kein Fehler.
        """
        target = path or self.DEFAULT_CONFIG
        raw: dict = {}
        if target.exists():
            with open(target, "r", encoding="utf-8") as f:
                loaded = yaml.load(f)
            raw = dict(loaded or {})
            logger.debug(f"Konfiguration gelesen: {target}")

        for env_key, field in ENV_OVERRIDES.items():
            value = self.environ.get(env_key)
            if value is not None and value != "":
                raw[field] = value

        try:
            return ClientConfig.model_validate(raw)
        except Exception as e:
            raise ValueError(
                f"Konfiguration ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e

    # ─── Speichern ───

    def save(self, config: ClientConfig, path: Optional[Path] = None) -> Path:
        """Speichere Config als YAML mit Kommentaren."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        cm = CommentedMap(json.loads(config.model_dump_json()))
        for field, comment in _FIELD_COMMENTS.items():
            if field in cm:
                cm.yaml_add_eol_comment(comment, field)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(cm, f)

        logger.info(f"Konfiguration gespeichert: {target}")
        return target
