"""View-Controller: Zustandsautomat ``form ↔ schedule`` und Abruf-Workflow.

Übergänge:
  form → schedule   nur durch einen erfolgreichen Abruf (submit)
  schedule → form   durch die Zurück-Aktion (Host oder lokal)

Alle Zustandsänderungen laufen auf der Event-Loop; nur der HTTP-Aufruf
selbst wird per ``asyncio.to_thread`` ausgelagert. Das ``loading``-Flag
wird vor dem ersten Suspendierungspunkt gesetzt und schließt so einen
zweiten gleichzeitigen Abruf aus.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import TYPE_CHECKING, Any, Callable, Coroutine, Optional

from client.errors import ScheduleClientError
from host.base import Host, NullHost
from models.calendar import CalendarResponse
from models.form_state import FormState, ViewState

if TYPE_CHECKING:
    from client.api import ScheduleApiClient
    from state.store import FormStore

logger = logging.getLogger(__name__)

Listener = Callable[[], None]
AlertCallback = Callable[[str], None]
Spawner = Callable[[Coroutine[Any, Any, bool]], Any]

FALLBACK_ERROR_MESSAGE = "Ошибка загрузки расписания"


def _log_alert(message: str) -> None:
    logger.error(message)


def _spawn_task(coro: Coroutine[Any, Any, bool]) -> Any:
    return asyncio.get_running_loop().create_task(coro)


class ViewController:
    """Wurzel der Anwendung: hält Formular, Ansicht, Ladezustand und Antwort."""

    def __init__(
        self,
        store: "FormStore",
        client: "ScheduleApiClient",
        host: Optional[Host] = None,
        alert: Optional[AlertCallback] = None,
        spawn: Optional[Spawner] = None,
        today: Optional[date] = None,
    ) -> None:
        self.store = store
        self.client = client
        self.host = host or NullHost()
        self.alert = alert or _log_alert
        self.spawn = spawn or _spawn_task
        self.form: FormState = store.load(today)
        self.view = ViewState.FORM
        self.loading = False
        self.response: Optional[CalendarResponse] = None
        self._listeners: list[Listener] = []

    # ─── Beobachter ───

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ─── Formular ───

    @property
    def form_valid(self) -> bool:
        return self.form.is_valid

    def update_form(self, **changes: str) -> FormState:
        """Ändert Formularfelder und persistiert das Formular sofort."""
        self.form = self.form.model_copy(update=changes)
        self.store.save(self.form)
        self._notify()
        return self.form

    # ─── Abruf ───

    def trigger_submit(self) -> bool:
        """Startet den Abruf, falls das Formular gültig ist und nichts lädt.

        Klicks während eines laufenden Abrufs werden ignoriert, nicht
        eingereiht.
        """
        if self.loading or not self.form_valid:
            logger.debug(
                f"Absenden ignoriert (loading={self.loading}, "
                f"valid={self.form_valid})"
            )
            return False
        self.spawn(self.submit())
        return True

    async def submit(self) -> bool:
        """Abruf-Workflow. Gibt True zurück, wenn der Stundenplan angezeigt wird."""
        if self.loading or not self.form_valid:
            return False

        self.loading = True
        self._notify()
        succeeded = False
        try:
            self.client.ensure_configured()
            self.host.haptic_impact("light")
            response = await asyncio.to_thread(
                self.client.fetch_calendar, self.form, self.host.init_data
            )
            self.response = response
            self.view = ViewState.SCHEDULE
            succeeded = True
            logger.info(f"Ansicht: {self.view.value}")
        except ScheduleClientError as e:
            logger.warning(f"Abruf fehlgeschlagen: {e}")
            self.alert(str(e) or FALLBACK_ERROR_MESSAGE)
        finally:
            self.loading = False
            self._notify()
        return succeeded

    # ─── Navigation ───

    def go_back(self) -> None:
        """schedule → form; die gehaltene Antwort bleibt erhalten."""
        self.view = ViewState.FORM
        logger.info(f"Ansicht: {self.view.value}")
        self._notify()
