"""Gemeinsame Fixtures: Beispiel-Antworten, Fake-HTTP-Session, Controller."""

from datetime import date

import pytest
import requests

from client.api import ScheduleApiClient
from models.form_state import FormState
from state.controller import ViewController
from state.store import FormStore

TODAY = date(2024, 5, 1)

CALENDAR_JSON = {
    "calendar": {
        "full_university_name": "Test University",
        "short_university_name": "TU",
        "group_name": "G-1",
        "schedule": [
            {
                "date": "2024-05-01",
                "subjects": [
                    {
                        "time_from": "08:00:00",
                        "time_to": "09:30:00",
                        "subject_type": "Лекция",
                        "subject_name": "Математический анализ",
                        "teacher_name": "Иванов И.И.",
                        "subgroup": "0",
                        "academic_building": "1",
                        "auditory_number": "101",
                    },
                    {
                        "time_from": "09:45:00",
                        "time_to": "11:15:00",
                        "subject_type": "лабораторная работа",
                        "subject_name": "Физика",
                        "teacher_name": "",
                        "subgroup": "2",
                        "academic_building": "3",
                        "auditory_number": "3-14",
                    },
                ],
            },
            {"date": "2024-05-02", "subjects": []},
        ],
    }
}


def make_response(status: int, body: bytes, reason: str = "") -> requests.Response:
    """Echtes requests.Response-Objekt ohne Netzwerk."""
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.reason = reason
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Zeichnet POST-Aufrufe auf und liefert eine vorbereitete Antwort."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls: list[dict] = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers,
                           "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def valid_form() -> FormState:
    return FormState(
        full_university_name="Test University",
        group_name="G-1",
        date_from="2024-05-01",
        date_to="2024-05-07",
    )


@pytest.fixture
def store(tmp_path) -> FormStore:
    return FormStore(tmp_path / "local_storage.json")


@pytest.fixture
def make_controller(store, valid_form):
    """Fabrik: Controller mit gültigem Formular und Fake-Session."""

    def _make(session=None, endpoint="https://api.example.test/schedule",
              host=None, form=valid_form):
        store.save(form)
        alerts: list[str] = []
        spawned: list = []
        client = ScheduleApiClient(endpoint, session=session or FakeSession())
        controller = ViewController(store, client, host=host,
                                    alert=alerts.append, spawn=spawned.append,
                                    today=TODAY)
        controller.alerts = alerts
        controller.spawned = spawned
        return controller

    return _make
