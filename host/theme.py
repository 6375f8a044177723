"""Abbildung der Host-Theme-Parameter auf die festen Theme-Variablen der App."""

from typing import Optional

# Ausgabe-Variable → (Host-Token, Fallback bei hellem Schema)
THEME_MAPPING: dict[str, tuple[str, str]] = {
    "app-bg":           ("bg_color",                "#ffffff"),
    "app-bg-secondary": ("secondary_bg_color",      "#f2f3f5"),
    "app-card":         ("secondary_bg_color",      "#f2f3f5"),
    "app-text":         ("text_color",              "#0f0f10"),
    "app-muted":        ("hint_color",              "#707579"),
    "app-border":       ("section_separator_color", "#e6e7eb"),
    "app-accent":       ("button_color",            "#2ea6ff"),
}

LIGHT_SCHEME = "light"


def default_theme_variables() -> dict[str, str]:
    """Basis-Palette der App (gilt ohne Host und für nicht gesetzte Variablen)."""
    return {var: fallback for var, (_, fallback) in THEME_MAPPING.items()}


def theme_variables(color_scheme: Optional[str],
                    params: Optional[dict[str, str]]) -> dict[str, str]:
    """Berechnet die vom Host gesetzten Theme-Variablen.

    Beim hellen Schema werden fehlende Tokens mit Fallback-Farben belegt,
    bei jedem anderen Schema bleiben sie ungesetzt (nicht im Ergebnis).
    """
    params = params or {}
    result: dict[str, str] = {}
    for var, (token, fallback) in THEME_MAPPING.items():
        value = params.get(token)
        if not value and color_scheme == LIGHT_SCHEME:
            value = fallback
        if value:
            result[var] = value
    return result
