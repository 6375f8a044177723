"""Konkreter Host für den eingebetteten Betrieb.

Ein Launcher (z.B. der Bot-Prozess der Chat-Plattform) startet die App mit
Umgebungsvariablen:

  MINIAPP_INIT_DATA      Session-Init-Daten (Pflicht, dient als Erkennung)
  MINIAPP_COLOR_SCHEME   "light" oder "dark"
  MINIAPP_THEME_PARAMS   JSON-Objekt mit Theme-Tokens (bg_color, ...)
  MINIAPP_THEME_FILE     JSON-Datei {"color_scheme": ..., "theme_params": {...}},
                         wird bei Änderung neu gelesen (themeChanged)

Die Chrome-Buttons halten nur Zustand; gezeichnet werden sie von der
Textual-App (ui.widgets.HostChromeBar) über den ``on_change``-Callback.
"""

import json
import logging
import os
from pathlib import Path
from typing import Callable, Mapping, Optional

from host.base import (
    THEME_CHANGED,
    ClickHandler,
    EventHandler,
    Host,
    HostButton,
    NullHost,
)

logger = logging.getLogger(__name__)

ENV_INIT_DATA = "MINIAPP_INIT_DATA"
ENV_COLOR_SCHEME = "MINIAPP_COLOR_SCHEME"
ENV_THEME_PARAMS = "MINIAPP_THEME_PARAMS"
ENV_THEME_FILE = "MINIAPP_THEME_FILE"


class EmbeddedButton(HostButton):
    """Zustand eines Host-Buttons."""

    def __init__(self, on_change: Callable[[], None], text: str = "") -> None:
        self._on_change = on_change
        self.visible = False
        self.text = text
        self.is_active = True
        self.handlers: list[ClickHandler] = []

    def show(self) -> None:
        self.visible = True
        self._on_change()

    def hide(self) -> None:
        self.visible = False
        self._on_change()

    def set_params(self, text: Optional[str] = None,
                   is_active: Optional[bool] = None) -> None:
        if text is not None:
            self.text = text
        if is_active is not None:
            self.is_active = is_active
        self._on_change()

    def on_click(self, handler: ClickHandler) -> None:
        self.handlers.append(handler)

    def off_click(self, handler: ClickHandler) -> None:
        if handler in self.handlers:
            self.handlers.remove(handler)

    def click(self) -> None:
        """Vom Host ausgelöster Klick; nur sichtbare, aktive Buttons reagieren."""
        if not self.visible or not self.is_active:
            return
        for handler in list(self.handlers):
            handler()


class EmbeddedHost(Host):
    def __init__(
        self,
        init_data: str,
        color_scheme: Optional[str] = None,
        theme_params: Optional[dict[str, str]] = None,
        theme_file: Optional[Path] = None,
    ) -> None:
        self._init_data = init_data
        self._color_scheme = color_scheme
        self._theme_params = dict(theme_params or {})
        self.theme_file = theme_file
        self._theme_mtime: Optional[float] = None
        self._listeners: dict[str, list[EventHandler]] = {}
        self.is_ready = False
        self.is_expanded = False
        # Von der UI gesetzt: Neuzeichnen der Chrome bzw. haptisches Signal
        self.on_change: Callable[[], None] = lambda: None
        self.on_haptic: Callable[[str], None] = lambda style: None
        self.main_button = EmbeddedButton(self._changed)
        self.back_button = EmbeddedButton(self._changed, text="Назад")
        if theme_file is not None:
            self.reload_theme(emit=False)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "EmbeddedHost":
        params: dict[str, str] = {}
        raw = environ.get(ENV_THEME_PARAMS)
        if raw:
            try:
                loaded = json.loads(raw)
                if isinstance(loaded, dict):
                    params = {str(k): str(v) for k, v in loaded.items()}
            except ValueError as e:
                logger.warning(f"{ENV_THEME_PARAMS} ist kein gültiges JSON: {e}")
        theme_file = environ.get(ENV_THEME_FILE)
        return cls(
            init_data=environ.get(ENV_INIT_DATA, ""),
            color_scheme=environ.get(ENV_COLOR_SCHEME) or None,
            theme_params=params,
            theme_file=Path(theme_file) if theme_file else None,
        )

    def _changed(self) -> None:
        self.on_change()

    @property
    def is_present(self) -> bool:
        return True

    @property
    def init_data(self) -> str:
        return self._init_data

    @property
    def color_scheme(self) -> Optional[str]:
        return self._color_scheme

    @property
    def theme_params(self) -> dict[str, str]:
        return dict(self._theme_params)

    def ready(self) -> None:
        self.is_ready = True
        logger.debug("Host: ready")

    def expand(self) -> None:
        self.is_expanded = True
        logger.debug("Host: expand")

    def on_event(self, name: str, handler: EventHandler) -> None:
        self._listeners.setdefault(name, []).append(handler)

    def off_event(self, name: str, handler: EventHandler) -> None:
        handlers = self._listeners.get(name, [])
        if handler in handlers:
            handlers.remove(handler)

    def listener_count(self, name: str) -> int:
        return len(self._listeners.get(name, []))

    def emit(self, name: str) -> None:
        for handler in list(self._listeners.get(name, [])):
            handler()

    def haptic_impact(self, style: str = "light") -> None:
        self.on_haptic(style)

    # ─── Theme ───

    def set_theme(self, color_scheme: Optional[str],
                  theme_params: Optional[dict[str, str]]) -> None:
        """Neues Theme übernehmen und themeChanged auslösen."""
        self._color_scheme = color_scheme
        self._theme_params = dict(theme_params or {})
        self.emit(THEME_CHANGED)

    def reload_theme(self, emit: bool = True) -> bool:
        """Liest die Theme-Datei neu, falls sie sich geändert hat.

        Gibt True zurück, wenn ein neues Theme übernommen wurde.
        """
        if self.theme_file is None or not self.theme_file.exists():
            return False
        mtime = self.theme_file.stat().st_mtime
        if mtime == self._theme_mtime:
            return False
        self._theme_mtime = mtime
        try:
            with open(self.theme_file, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Theme-Datei nicht lesbar ({self.theme_file}): {e}")
            return False
        if not isinstance(raw, dict):
            return False
        params = raw.get("theme_params") or {}
        if not isinstance(params, dict):
            logger.warning(f"theme_params in {self.theme_file} ist kein Objekt, ignoriert")
            params = {}
        self._color_scheme = raw.get("color_scheme") or None
        self._theme_params = {str(k): str(v) for k, v in params.items()}
        logger.info(f"Host-Theme neu geladen: {self._color_scheme}")
        if emit:
            self.emit(THEME_CHANGED)
        return True


def detect_host(environ: Optional[Mapping[str, str]] = None) -> Host:
    """Capability-Probe: EmbeddedHost, wenn Init-Daten vorhanden sind, sonst NullHost."""
    environ = os.environ if environ is None else environ
    if ENV_INIT_DATA in environ:
        logger.info("Einbettungs-Host erkannt")
        return EmbeddedHost.from_environ(environ)
    return NullHost()
