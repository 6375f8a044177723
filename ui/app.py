"""Textual-App des Stundenplan-Clients.

Startet mit: python main.py run
Tasten: Strg+R = Stundenplan anzeigen, Esc = Zurück, Strg+Q = Beenden
"""

from __future__ import annotations

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.suggester import SuggestFromList
from textual.validation import Regex
from textual.widgets import Button, Footer, Header, Input, OptionList, Static

from config.defaults import UNIVERSITIES, filter_universities
from config.schema import ClientConfig
from host.base import Host
from host.chrome import LOADING_TEXT, MAIN_BUTTON_TEXT, HostChromeAdapter
from host.embedded import EmbeddedHost
from host.theme import default_theme_variables
from models.form_state import ViewState
from state.controller import ViewController
from ui.renderer import FORM_HINT_TEXT, render_calendar
from ui.rich_render import calendar_renderable
from ui.widgets import AlertScreen, HostChromeBar

logger = logging.getLogger(__name__)

# Input-ID → Formularfeld
FORM_FIELDS: dict[str, str] = {
    "university": "full_university_name",
    "group": "group_name",
    "date-from": "date_from",
    "date-to": "date_to",
}

THEME_POLL_SECONDS = 2.0
DATE_INPUT_RESTRICT = r"[0-9-]*"
DATE_INPUT_PATTERN = r"\d{4}-\d{2}-\d{2}"


def _date_input(value: str, input_id: str) -> Input:
    """Datumsfeld: nur Ziffern und Bindestriche, markiert alles außer YYYY-MM-DD."""
    return Input(
        value=value,
        placeholder="ГГГГ-ММ-ДД",
        restrict=DATE_INPUT_RESTRICT,
        max_length=10,
        validators=[Regex(DATE_INPUT_PATTERN, failure_description="Формат: ГГГГ-ММ-ДД")],
        id=input_id,
    )


class ScheduleApp(App):
    CSS = """
    Screen { background: $app-bg; color: $app-text; }
    #form-view, #schedule-view { padding: 0 1; }
    .card {
        background: $app-card;
        border: round $app-border;
        padding: 0 1;
        height: auto;
    }
    .row { height: auto; }
    .row Input { width: 1fr; }
    #university-clear, #university-toggle { width: 5; min-width: 5; }
    #university-list { height: auto; max-height: 10; display: none; }
    #university-list.open { display: block; }
    #submit { width: 1fr; margin-top: 1; }
    #submit:focus { border: tall $app-accent; }
    .hint { color: $app-muted; padding: 1 1; }
    #back { width: auto; margin-bottom: 1; }
    """

    BINDINGS = [
        Binding("ctrl+r", "submit", "Показать"),
        Binding("escape", "back", "Назад"),
        Binding("ctrl+q", "quit", "Выход"),
    ]

    def __init__(self, config: ClientConfig, controller: ViewController,
                 host: Host) -> None:
        # Muss vor App.__init__ existieren: get_css_variables() liest es
        self._host_theme: dict[str, str] = {}
        super().__init__()
        self.client_config = config
        self.controller = controller
        self.embed_host = host
        self.adapter = HostChromeAdapter(host, controller,
                                         apply_theme=self.apply_host_theme)
        self._university_choices: list[str] = []
        controller.alert = self.show_alert
        controller.spawn = lambda coro: self.run_worker(coro, group="submit")

    # ─── Theme ───

    def get_css_variables(self) -> dict[str, str]:
        variables = super().get_css_variables()
        variables.update(default_theme_variables())
        variables.update(self._host_theme)
        return variables

    def apply_host_theme(self, variables: dict[str, str]) -> None:
        self._host_theme = dict(variables)
        self.refresh_css(animate=False)

    # ─── Aufbau ───

    def compose(self) -> ComposeResult:
        form = self.controller.form
        yield Header()
        with VerticalScroll(id="form-view"):
            with Vertical(classes="card"):
                with Horizontal(classes="row"):
                    yield Input(
                        value=form.full_university_name,
                        placeholder="Полное название вуза (напр. Санкт-Петербургский горный университет)",
                        suggester=SuggestFromList(UNIVERSITIES, case_sensitive=False),
                        id="university",
                    )
                    yield Button("✕", id="university-clear")
                    yield Button("▼", id="university-toggle")
                yield OptionList(id="university-list")
                yield Input(value=form.group_name,
                            placeholder="Группа (напр. СНП-24)", id="group")
                with Horizontal(classes="row"):
                    yield _date_input(form.date_from, "date-from")
                    yield _date_input(form.date_to, "date-to")
                yield Button(MAIN_BUTTON_TEXT, id="submit", variant="primary")
            yield Static(FORM_HINT_TEXT, classes="hint")
        with VerticalScroll(id="schedule-view"):
            yield Button("← Назад", id="back")
            yield Static(id="schedule-body")
        if isinstance(self.embed_host, EmbeddedHost):
            yield HostChromeBar(self.embed_host, id="host-chrome")
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.client_config.app_title
        logger.info(f"TUI gestartet (Host: {self.embed_host.is_present})")
        # Referenzen halten: bei offenem Dialog ist ein anderer Screen aktiv
        self._form_view = self.query_one("#form-view")
        self._schedule_view = self.query_one("#schedule-view")
        self._submit = self.query_one("#submit", Button)
        self._back = self.query_one("#back", Button)
        self._schedule_body = self.query_one("#schedule-body", Static)
        self._chrome_bar: Optional[HostChromeBar] = None
        if isinstance(self.embed_host, EmbeddedHost):
            self._chrome_bar = self.query_one(HostChromeBar)
            self.embed_host.on_change = self._refresh_host_chrome
            self.embed_host.on_haptic = lambda style: self.bell()
            if self.embed_host.theme_file is not None:
                self.set_interval(THEME_POLL_SECONDS, self.embed_host.reload_theme)
        self.controller.subscribe(self.refresh_view)
        self.adapter.start()
        self.refresh_view()

    def teardown(self) -> None:
        """Host-Listener und Klick-Handler lösen (nach dem Beenden)."""
        self.adapter.stop()
        self.controller.unsubscribe(self.refresh_view)

    # ─── Darstellung ───

    def refresh_view(self) -> None:
        """Zeigt die aktuelle Ansicht; lokale Buttons nur ohne Host."""
        c = self.controller
        in_form = c.view is ViewState.FORM
        self._form_view.display = in_form
        self._schedule_view.display = not in_form

        submit = self._submit
        submit.display = not self.embed_host.is_present
        submit.label = LOADING_TEXT if c.loading else MAIN_BUTTON_TEXT
        submit.disabled = not c.form_valid or c.loading

        self._back.display = not self.embed_host.is_present
        if not in_form:
            self._schedule_body.update(calendar_renderable(render_calendar(c.response)))

    def _refresh_host_chrome(self) -> None:
        if self._chrome_bar is not None:
            self._chrome_bar.refresh_from_host()

    def show_alert(self, message: str) -> None:
        self.push_screen(AlertScreen(message))

    # ─── Eingaben ───

    def on_input_changed(self, event: Input.Changed) -> None:
        field = FORM_FIELDS.get(event.input.id or "")
        if field is None:
            return
        if getattr(self.controller.form, field) != event.value:
            self.controller.update_form(**{field: event.value})
        if field == "full_university_name":
            self._fill_university_list(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "submit":
            self.controller.trigger_submit()
        elif button_id == "back":
            self.controller.go_back()
        elif button_id == "university-clear":
            self.query_one("#university", Input).value = ""
        elif button_id == "university-toggle":
            option_list = self.query_one("#university-list", OptionList)
            option_list.toggle_class("open")
            self._fill_university_list(self.controller.form.full_university_name)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        index = event.option_index
        if 0 <= index < len(self._university_choices):
            self.query_one("#university", Input).value = self._university_choices[index]
        self.query_one("#university-list", OptionList).remove_class("open")

    def _fill_university_list(self, query: str) -> None:
        option_list = self.query_one("#university-list", OptionList)
        self._university_choices = filter_universities(query)
        option_list.clear_options()
        if self._university_choices:
            option_list.add_options(self._university_choices)
        else:
            option_list.add_option("Ничего не найдено")

    # ─── Aktionen ───

    def action_submit(self) -> None:
        if isinstance(self.embed_host, EmbeddedHost):
            self.embed_host.main_button.click()
        else:
            self.controller.trigger_submit()

    def action_back(self) -> None:
        if self.controller.view is not ViewState.SCHEDULE:
            return
        if isinstance(self.embed_host, EmbeddedHost):
            self.embed_host.back_button.click()
        else:
            self.controller.go_back()


def run_app(config: ClientConfig, controller: ViewController,
            host: Optional[Host] = None) -> None:
    """Startet die TUI-Anwendung."""
    app = ScheduleApp(config, controller, host or controller.host)
    try:
        app.run()
    finally:
        app.teardown()
