from pathlib import Path

from pydantic import BaseModel, Field


# ─── CLIENT-KONFIGURATION ───

class ClientConfig(BaseModel):
    """Konfiguration des Stundenplan-Clients.

    Quelle: optionale YAML-Datei, überlagert von Umgebungsvariablen
    (siehe config.manager.ENV_OVERRIDES).
    """
    # URL der Schedule-API; leer = nicht konfiguriert (Fehler erst beim Absenden)
    api_url: str = Field("",
        description="Endpunkt der Schedule-API (POST)")
    # Titel in der Kopfzeile
    app_title: str = Field("Расписание",
        description="Anzeigetitel der App")
    # Zeitlimit für die HTTP-Anfrage in Sekunden (0 = kein Limit)
    request_timeout: float = Field(30.0, ge=0,
        description="Zeitlimit der API-Anfrage (Sekunden, 0 = kein Limit)")
    # Datei für den persistenten Formular-Zustand
    state_file: Path = Field(Path("state") / "local_storage.json",
        description="Speicherort des Formular-Zustands")

    @property
    def timeout_or_none(self) -> float | None:
        return self.request_timeout or None
