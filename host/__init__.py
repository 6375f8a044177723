from host.base import Host, HostButton, NullHost, THEME_CHANGED
from host.embedded import EmbeddedHost, detect_host
from host.chrome import HostChromeAdapter
from host.theme import theme_variables, default_theme_variables

__all__ = [
    "Host",
    "HostButton",
    "NullHost",
    "THEME_CHANGED",
    "EmbeddedHost",
    "detect_host",
    "HostChromeAdapter",
    "theme_variables",
    "default_theme_variables",
]
