"""HTTP-Client für die Schedule-API.

Vertrag: ein einziger POST an die konfigurierte URL mit JSON-Body
``{full_university_name, group_name, dt_from, dt_to}`` und dem Header
``X-Telegram-Init-Data``. Erfolg: ``{"calendar": {...}}``.
"""

import logging
from http import HTTPStatus
from typing import Optional

import requests
from pydantic import ValidationError

from client.errors import ApiError, ConfigurationError, NetworkError, ParseError
from models.calendar import CalendarResponse
from models.form_state import FormState
from ui.formatting import format_date_for_backend

logger = logging.getLogger(__name__)

INIT_DATA_HEADER = "X-Telegram-Init-Data"


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


class ScheduleApiClient:
    """Synchroner Client; der Controller ruft ihn in einem Worker-Thread auf."""

    def __init__(
        self,
        endpoint: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.endpoint = endpoint
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint)

    def ensure_configured(self) -> None:
        """Raises ConfigurationError, wenn kein Endpunkt gesetzt ist."""
        if not self.is_configured:
            raise ConfigurationError(
                "SCHEDULE_API_URL не задан: укажите адрес API в конфигурации"
            )

    @staticmethod
    def build_payload(form: FormState) -> dict:
        """Request-Body: Namen getrimmt, Datumsbereich als Tagesbeginn/-ende."""
        return {
            "full_university_name": form.full_university_name.strip(),
            "group_name": form.group_name.strip(),
            "dt_from": format_date_for_backend(form.date_from, end_of_day=False),
            "dt_to": format_date_for_backend(form.date_to, end_of_day=True),
        }

    def fetch_calendar(self, form: FormState, init_data: str = "") -> CalendarResponse:
        """Ruft den Stundenplan ab.

        Raises:
            ConfigurationError: Endpunkt nicht gesetzt (keine Netzwerk-I/O).
            NetworkError: Verbindungs- oder Lesefehler.
            ApiError: HTTP-Status außerhalb 2xx.
            ParseError: Body ist kein gültiges CalendarResponse-JSON.
        """
        self.ensure_configured()

        payload = self.build_payload(form)
        headers = {
            "Content-Type": "application/json",
            INIT_DATA_HEADER: init_data or "",
        }
        logger.info(
            f"POST {self.endpoint}: {payload['group_name']} "
            f"({payload['dt_from']} – {payload['dt_to']})"
        )
        try:
            response = self.session.post(
                self.endpoint, json=payload, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise NetworkError(f"Не удалось выполнить запрос: {e}") from e

        if not response.ok:
            try:
                text = response.text
            except (requests.RequestException, UnicodeDecodeError):
                text = ""
            detail = text or response.reason or _reason_phrase(response.status_code)
            logger.warning(f"API-Fehler {response.status_code}: {detail}")
            raise ApiError(response.status_code, detail)

        try:
            body = response.json()
        except ValueError as e:
            # requests.JSONDecodeError ist zugleich ValueError und RequestException
            raise ParseError(f"Ответ API не является JSON: {e}") from e
        except requests.RequestException as e:
            raise NetworkError(f"Не удалось прочитать ответ: {e}") from e

        try:
            result = CalendarResponse.model_validate(body)
        except ValidationError as e:
            raise ParseError(f"Неожиданный формат ответа API: {e}") from e

        logger.info(
            f"Stundenplan empfangen: {len(result.calendar.schedule)} Tage, "
            f"{result.calendar.total_subjects} Veranstaltungen"
        )
        return result
