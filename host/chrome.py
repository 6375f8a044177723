"""Synchronisiert die Host-Chrome (Theme, Haupt- und Zurück-Aktion) mit dem
Zustand des View-Controllers.

``sync()`` ist der reaktive Schritt "aktuelle Bindungen anwenden" und läuft
nach jeder Zustandsänderung des Controllers. Vor jedem Binden wird der
vorherige Handler gelöst, so dass immer genau ein Handler gebunden ist.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from host.base import THEME_CHANGED, ClickHandler, Host
from host.theme import theme_variables
from models.form_state import ViewState

if TYPE_CHECKING:
    from state.controller import ViewController

logger = logging.getLogger(__name__)

MAIN_BUTTON_TEXT = "Показать расписание"
LOADING_TEXT = "Загрузка…"

ThemeApplier = Callable[[dict[str, str]], None]


class HostChromeAdapter:
    def __init__(
        self,
        host: Host,
        controller: "ViewController",
        apply_theme: Optional[ThemeApplier] = None,
    ) -> None:
        self.host = host
        self.controller = controller
        self._apply_theme = apply_theme or (lambda variables: None)
        self._main_handler: Optional[ClickHandler] = None
        self._back_handler: Optional[ClickHandler] = None
        self._started = False

    # ─── Lebenszyklus ───

    def start(self) -> None:
        """Beim Start: ready → expand → Theme, dann Bindungen anwenden."""
        if self._started:
            return
        self.host.ready()
        self.host.expand()
        self.apply_theme()
        self.host.on_event(THEME_CHANGED, self.apply_theme)
        self.controller.subscribe(self.sync)
        self._started = True
        self.sync()

    def stop(self) -> None:
        """Meldet Listener ab und löst beide Klick-Handler."""
        if not self._started:
            return
        self.host.off_event(THEME_CHANGED, self.apply_theme)
        self.controller.unsubscribe(self.sync)
        if self._main_handler is not None:
            self.host.main_button.off_click(self._main_handler)
            self._main_handler = None
        if self._back_handler is not None:
            self.host.back_button.off_click(self._back_handler)
            self._back_handler = None
        self._started = False

    # ─── Theme ───

    def apply_theme(self) -> None:
        variables = theme_variables(self.host.color_scheme, self.host.theme_params)
        logger.debug(f"Theme anwenden ({self.host.color_scheme}): {variables}")
        self._apply_theme(variables)

    # ─── Bindungen ───

    def sync(self) -> None:
        self._sync_main_button()
        self._sync_back_button()

    def _sync_main_button(self) -> None:
        c = self.controller
        button = self.host.main_button
        if c.view is ViewState.FORM and c.form_valid:
            button.set_params(
                text=LOADING_TEXT if c.loading else MAIN_BUTTON_TEXT,
                is_active=not c.loading,
            )
            button.show()
        else:
            button.hide()

        if self._main_handler is not None:
            button.off_click(self._main_handler)
        self._main_handler = self._on_main_click
        button.on_click(self._main_handler)

    def _sync_back_button(self) -> None:
        button = self.host.back_button
        if self.controller.view is ViewState.SCHEDULE:
            button.show()
        else:
            button.hide()

        if self._back_handler is not None:
            button.off_click(self._back_handler)
        self._back_handler = self._on_back_click
        button.on_click(self._back_handler)

    def _on_main_click(self) -> None:
        self.controller.trigger_submit()

    def _on_back_click(self) -> None:
        self.controller.go_back()
