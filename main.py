"""Stundenplan-Client — Haupt-CLI.

Verwendung:
  python main.py run                      TUI starten (Host wird automatisch erkannt)
  python main.py fetch                    Stundenplan abrufen und ausgeben
  python main.py fetch -u <vuz> -g <gr>   Formular ändern, dann abrufen
  python main.py config show              Konfiguration anzeigen
  python main.py config init              YAML-Konfiguration anlegen
  python main.py form show                Gespeichertes Formular anzeigen
  python main.py form reset               Gespeichertes Formular löschen
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _setup_logging(verbose: bool, log_file: Optional[Path] = None,
                   tui: bool = False) -> None:
    """Rich-Logging auf der Konsole; in der TUI in eine Datei oder die Textual-Devtools."""
    level = logging.DEBUG if verbose else logging.WARNING
    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"))
        level = logging.DEBUG if verbose else logging.INFO
    elif tui:
        from textual.logging import TextualHandler
        handler = TextualHandler()
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=level, handlers=[handler], force=True)


def _load_config_or_abort():
    """Lädt die Konfiguration oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    try:
        return ConfigManager().load()
    except ValueError as e:
        console.print(f"[red bold]Konfiguration ungültig:[/red bold]\n{e}")
        sys.exit(1)


def _build_controller(config, host=None, alert=None):
    from client.api import ScheduleApiClient
    from state.controller import ViewController
    from state.store import FormStore

    store = FormStore(config.state_file)
    client = ScheduleApiClient(config.api_url, timeout=config.timeout_or_none)
    return ViewController(store, client, host=host, alert=alert)


# ─── RUN ──────────────────────────────────────────────────────────────────────

@click.command("run")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Log-Datei (die TUI schreibt nicht auf die Konsole).")
@click.pass_context
def cmd_run(ctx: click.Context, log_file: Optional[Path]):
    """Startet die interaktive Oberfläche."""
    _setup_logging(ctx.obj.get("verbose", False), log_file, tui=True)
    config = _load_config_or_abort()
    from host.embedded import detect_host
    from ui.app import run_app

    host = detect_host()
    controller = _build_controller(config, host=host)
    run_app(config, controller, host)


# ─── FETCH ────────────────────────────────────────────────────────────────────

@click.command("fetch")
@click.option("--university", "-u", default=None, help="Voller Hochschulname.")
@click.option("--group", "-g", default=None, help="Gruppenname.")
@click.option("--date-from", default=None, help="Startdatum (YYYY-MM-DD).")
@click.option("--date-to", default=None, help="Enddatum (YYYY-MM-DD, inklusiv).")
def cmd_fetch(university: Optional[str], group: Optional[str],
              date_from: Optional[str], date_to: Optional[str]):
    """Ruft den Stundenplan ab (Werte ohne Option: gespeichertes Formular)."""
    config = _load_config_or_abort()
    from ui.renderer import render_calendar
    from ui.rich_render import calendar_renderable

    errors: list[str] = []
    controller = _build_controller(config, alert=errors.append)

    changes = {
        "full_university_name": university,
        "group_name": group,
        "date_from": date_from,
        "date_to": date_to,
    }
    changes = {k: v for k, v in changes.items() if v is not None}
    if changes:
        controller.update_form(**changes)

    if not controller.form_valid:
        console.print(
            "[red]Formular unvollständig.[/red] Benötigt: Hochschule (≥ 2 Zeichen), "
            "Gruppe und beide Daten.\n"
            "Verwenden Sie [bold]--university[/bold] und [bold]--group[/bold]."
        )
        sys.exit(1)

    with console.status("Загрузка…"):
        ok = asyncio.run(controller.submit())

    if not ok:
        for message in errors:
            console.print(f"[red bold]Fehler:[/red bold] {message}")
        sys.exit(1)

    console.print(calendar_renderable(render_calendar(controller.response)))


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
def config_show():
    """Zeigt die wirksame Konfiguration (YAML + Umgebung) an."""
    from config.manager import ConfigManager
    config = _load_config_or_abort()

    table = Table(title="Konfiguration", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    for k, v in config.model_dump().items():
        table.add_row(k, str(v) if v != "" else "[red]— nicht gesetzt —[/red]")
    console.print(table)
    source = ConfigManager.DEFAULT_CONFIG
    console.print(
        f"[dim]Datei: {source} ({'vorhanden' if source.exists() else 'fehlt'})[/dim]"
    )


@cmd_config.command("init")
@click.option("--api-url", default="", help="Endpunkt der Schedule-API.")
@click.option("--title", default=None, help="Anzeigetitel.")
def config_init(api_url: str, title: Optional[str]):
    """Legt die YAML-Konfiguration an (überschreibt nach Rückfrage)."""
    from config.manager import ConfigManager
    from config.schema import ClientConfig

    mgr = ConfigManager()
    if mgr.config_exists():
        if not click.confirm("Konfiguration existiert bereits. Überschreiben?",
                             default=False):
            return
    update = {"api_url": api_url}
    if title:
        update["app_title"] = title
    path = mgr.save(ClientConfig(**update))
    console.print(f"[green]✓[/green] Konfiguration gespeichert: {path}")


# ─── FORM ─────────────────────────────────────────────────────────────────────

@click.group("form")
def cmd_form():
    """Gespeichertes Formular anzeigen oder zurücksetzen."""


@cmd_form.command("show")
def form_show():
    """Zeigt das gespeicherte Formular an."""
    config = _load_config_or_abort()
    from state.store import FormStore
    form = FormStore(config.state_file).load()

    console.print(Panel(
        f"[bold]{form.full_university_name or '—'}[/bold]\n"
        f"Группа: {form.group_name or '—'}\n"
        f"{form.date_from} … {form.date_to}",
        title="Formular",
        border_style="green" if form.is_valid else "yellow",
    ))


@cmd_form.command("reset")
def form_reset():
    """Löscht das gespeicherte Formular."""
    config = _load_config_or_abort()
    from state.store import FormStore
    FormStore(config.state_file).clear()
    console.print("[green]✓[/green] Formular zurückgesetzt.")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliche Log-Ausgabe.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Stundenplan-Client für Hochschulgruppen.

    Starten Sie mit: python main.py run
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if ctx.invoked_subcommand != "run":
        _setup_logging(verbose)


def main():
    """Einstiegspunkt. Ohne Argumente wird die TUI gestartet."""
    if len(sys.argv) == 1:
        sys.argv.append("run")
    cli()


# Befehle registrieren
cli.add_command(cmd_run)
cli.add_command(cmd_fetch)
cli.add_command(cmd_config)
cli.add_command(cmd_form)


if __name__ == "__main__":
    main()
