"""Fehlerarten beim Abruf des Stundenplans.

Alle Fehler werden erst an der Grenze des Abruf-Workflows
(state.controller.ViewController.submit bzw. CLI ``fetch``) abgefangen
und dem Nutzer angezeigt. Keiner wird automatisch wiederholt.
"""


class ScheduleClientError(Exception):
    """Basisklasse: Abruf des Stundenplans fehlgeschlagen."""


class ConfigurationError(ScheduleClientError):
    """API-Endpunkt nicht konfiguriert."""


class NetworkError(ScheduleClientError):
    """Anfrage konnte nicht gesendet oder Antwort nicht gelesen werden."""


class ApiError(ScheduleClientError):
    """Server hat mit einem Nicht-Erfolgs-Status geantwortet."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Ошибка API {status_code}: {detail}")


class ParseError(ScheduleClientError):
    """Antwort ist kein gültiges JSON oder hat nicht die erwartete Form."""
