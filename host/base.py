"""Schnittstelle zum optionalen Einbettungs-Host (Mini-App-Umgebung).

Der Host wird als ein einziges Capability-Objekt modelliert. Ist kein Host
vorhanden, wird ``NullHost`` verwendet: dieselbe Schnittstelle, jede
Operation ein No-op. Controller und UI verzweigen dadurch nie auf
"Host vorhanden?".
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

ClickHandler = Callable[[], None]
EventHandler = Callable[[], None]

THEME_CHANGED = "themeChanged"


class HostButton(ABC):
    """Ein vom Host bereitgestellter Einzel-Button (Haupt- oder Zurück-Aktion)."""

    @abstractmethod
    def show(self) -> None: ...

    @abstractmethod
    def hide(self) -> None: ...

    @abstractmethod
    def on_click(self, handler: ClickHandler) -> None: ...

    @abstractmethod
    def off_click(self, handler: ClickHandler) -> None: ...

    def set_params(self, text: Optional[str] = None,
                   is_active: Optional[bool] = None) -> None:
        """Beschriftung/Aktivierung setzen (nur die Haupt-Aktion nutzt das)."""


class Host(ABC):
    """Fähigkeiten des Einbettungs-Hosts."""

    main_button: HostButton
    back_button: HostButton

    @property
    @abstractmethod
    def is_present(self) -> bool: ...

    @property
    @abstractmethod
    def init_data(self) -> str:
        """Session-Init-Daten für den API-Header ("" ohne Host)."""

    @property
    @abstractmethod
    def color_scheme(self) -> Optional[str]: ...

    @property
    @abstractmethod
    def theme_params(self) -> dict[str, str]: ...

    @abstractmethod
    def ready(self) -> None: ...

    @abstractmethod
    def expand(self) -> None: ...

    @abstractmethod
    def on_event(self, name: str, handler: EventHandler) -> None: ...

    @abstractmethod
    def off_event(self, name: str, handler: EventHandler) -> None: ...

    @abstractmethod
    def haptic_impact(self, style: str = "light") -> None: ...


class NullButton(HostButton):
    def show(self) -> None:
        pass

    def hide(self) -> None:
        pass

    def on_click(self, handler: ClickHandler) -> None:
        pass

    def off_click(self, handler: ClickHandler) -> None:
        pass


class NullHost(Host):
    """Kein Host: alle Operationen sind No-ops."""

    def __init__(self) -> None:
        self.main_button = NullButton()
        self.back_button = NullButton()

    @property
    def is_present(self) -> bool:
        return False

    @property
    def init_data(self) -> str:
        return ""

    @property
    def color_scheme(self) -> Optional[str]:
        return None

    @property
    def theme_params(self) -> dict[str, str]:
        return {}

    def ready(self) -> None:
        pass

    def expand(self) -> None:
        pass

    def on_event(self, name: str, handler: EventHandler) -> None:
        pass

    def off_event(self, name: str, handler: EventHandler) -> None:
        pass

    def haptic_impact(self, style: str = "light") -> None:
        pass
