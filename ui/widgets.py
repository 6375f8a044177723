"""Textual-Widgets: Host-Chrome-Leiste und Fehlerdialog."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label

from host.embedded import EmbeddedHost


class HostChromeBar(Horizontal):
    """Zeichnet die Buttons eines EmbeddedHost und leitet Klicks an ihn weiter."""

    DEFAULT_CSS = """
    HostChromeBar {
        height: auto;
        background: $app-bg-secondary;
        padding: 0 1;
    }
    HostChromeBar #host-back { width: auto; }
    HostChromeBar #host-main { width: 1fr; }
    """

    def __init__(self, host: EmbeddedHost, **kwargs) -> None:
        super().__init__(**kwargs)
        self.embed_host = host

    def compose(self) -> ComposeResult:
        yield Button(self.embed_host.back_button.text, id="host-back")
        yield Button(self.embed_host.main_button.text or " ", id="host-main",
                     variant="primary")

    def refresh_from_host(self) -> None:
        back = self.query_one("#host-back", Button)
        main = self.query_one("#host-main", Button)
        back.display = self.embed_host.back_button.visible
        main.display = self.embed_host.main_button.visible
        main.label = self.embed_host.main_button.text or " "
        main.disabled = not self.embed_host.main_button.is_active
        self.display = back.display or main.display

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "host-main":
            self.embed_host.main_button.click()
        elif event.button.id == "host-back":
            self.embed_host.back_button.click()


class AlertScreen(ModalScreen[None]):
    """Blockierender Hinweis, der mit OK bestätigt werden muss."""

    DEFAULT_CSS = """
    AlertScreen { align: center middle; }
    AlertScreen > Vertical {
        width: 60;
        height: auto;
        border: thick $error;
        background: $app-bg;
        padding: 1 2;
    }
    AlertScreen Label { width: 1fr; margin-bottom: 1; color: $app-text; }
    """

    BINDINGS = [("escape", "dismiss_alert", "OK")]

    def __init__(self, message: str) -> None:
        super().__init__()
        self.alert_text = message

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.alert_text, id="alert-message")
            yield Button("OK", id="alert-ok", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss()

    def action_dismiss_alert(self) -> None:
        self.dismiss()
