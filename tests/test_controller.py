"""Tests für den View-Controller und den Abruf-Workflow."""

import asyncio
import copy
import json

import pytest
import requests

from client.api import INIT_DATA_HEADER
from host.embedded import EmbeddedHost
from models.form_state import FormState, ViewState
from tests.conftest import CALENDAR_JSON, TODAY, FakeSession, make_response


def _ok_session() -> FakeSession:
    return FakeSession(make_response(200, json.dumps(CALENDAR_JSON).encode("utf-8")))


# ─── ERFOLGREICHER ABRUF ──────────────────────────────────────────────────────

class TestSubmitSuccess:
    def test_happy_path(self, make_controller):
        session = _ok_session()
        c = make_controller(session=session)
        assert c.view is ViewState.FORM

        assert asyncio.run(c.submit()) is True

        assert len(session.calls) == 1
        body = session.calls[0]["json"]
        assert body["dt_from"] == "2024-05-01 00:00:00"
        assert body["dt_to"] == "2024-05-07 23:59:59"
        assert c.view is ViewState.SCHEDULE
        assert c.response is not None
        assert c.response.calendar.group_name == "G-1"
        assert c.loading is False
        assert c.alerts == []

    def test_loading_lifecycle(self, make_controller):
        c = make_controller(session=_ok_session())
        seen: list[bool] = []
        c.subscribe(lambda: seen.append(c.loading))
        asyncio.run(c.submit())
        assert seen[0] is True
        assert seen[-1] is False

    def test_host_init_data_and_haptics(self, make_controller):
        session = _ok_session()
        host = EmbeddedHost(init_data="user=42&hash=ff")
        pulses: list[str] = []
        host.on_haptic = pulses.append
        c = make_controller(session=session, host=host)
        asyncio.run(c.submit())
        assert session.calls[0]["headers"][INIT_DATA_HEADER] == "user=42&hash=ff"
        assert pulses == ["light"]


# ─── FEHLERFÄLLE ──────────────────────────────────────────────────────────────

class TestSubmitFailure:
    def test_api_error(self, make_controller):
        session = FakeSession(make_response(500, b"server error"))
        c = make_controller(session=session)
        assert asyncio.run(c.submit()) is False
        assert len(c.alerts) == 1
        assert "500" in c.alerts[0]
        assert "server error" in c.alerts[0]
        assert c.view is ViewState.FORM
        assert c.loading is False
        assert c.response is None

    def test_missing_config_never_calls_network(self, make_controller):
        session = _ok_session()
        c = make_controller(session=session, endpoint="")
        assert asyncio.run(c.submit()) is False
        assert session.calls == []
        assert "SCHEDULE_API_URL" in c.alerts[0]
        assert c.loading is False
        assert c.view is ViewState.FORM

    def test_network_error(self, make_controller):
        c = make_controller(session=FakeSession(exc=requests.Timeout("timeout")))
        asyncio.run(c.submit())
        assert len(c.alerts) == 1
        assert c.view is ViewState.FORM
        assert c.loading is False

    def test_parse_error(self, make_controller):
        c = make_controller(session=FakeSession(make_response(200, b"[]")))
        asyncio.run(c.submit())
        assert len(c.alerts) == 1
        assert c.view is ViewState.FORM

    def test_malformed_day_date_is_parse_error(self, make_controller):
        body = copy.deepcopy(CALENDAR_JSON)
        body["calendar"]["schedule"][0]["date"] = "2024-05-01T00:00:00"
        c = make_controller(session=FakeSession(
            make_response(200, json.dumps(body).encode("utf-8"))))
        assert asyncio.run(c.submit()) is False
        assert len(c.alerts) == 1
        assert c.view is ViewState.FORM
        assert c.response is None

    def test_failure_keeps_previous_response(self, make_controller):
        session = _ok_session()
        c = make_controller(session=session)
        asyncio.run(c.submit())
        previous = c.response
        c.go_back()
        session.response = make_response(502, b"")
        asyncio.run(c.submit())
        assert c.response is previous
        assert c.view is ViewState.FORM
        assert "502" in c.alerts[0]

    def test_unexpected_error_propagates_and_clears_loading(self, make_controller):
        c = make_controller(session=FakeSession(exc=RuntimeError("bug")))
        with pytest.raises(RuntimeError):
            asyncio.run(c.submit())
        assert c.loading is False


# ─── GATE & MUTEX ─────────────────────────────────────────────────────────────

class TestGuards:
    def test_invalid_form_refused(self, make_controller):
        session = _ok_session()
        c = make_controller(session=session, form=FormState.default(TODAY))
        assert not c.form_valid
        assert asyncio.run(c.submit()) is False
        assert c.trigger_submit() is False
        assert session.calls == []
        assert c.alerts == []
        assert c.spawned == []

    def test_trigger_spawns_once(self, make_controller):
        c = make_controller()
        assert c.trigger_submit() is True
        assert len(c.spawned) == 1
        c.spawned[0].close()

    def test_trigger_ignored_while_loading(self, make_controller):
        c = make_controller()
        c.loading = True
        assert c.trigger_submit() is False
        assert c.spawned == []

    def test_second_submit_during_flight_is_noop(self, make_controller):
        session = _ok_session()
        c = make_controller(session=session)

        async def both():
            return await asyncio.gather(c.submit(), c.submit())

        results = asyncio.run(both())
        assert sorted(results) == [False, True]
        assert len(session.calls) == 1


# ─── FORMULAR & NAVIGATION ────────────────────────────────────────────────────

class TestFormAndNavigation:
    def test_update_form_persists(self, make_controller, store):
        c = make_controller()
        c.update_form(group_name="G-7")
        assert store.load(TODAY).group_name == "G-7"
        assert c.form.group_name == "G-7"

    def test_update_form_notifies(self, make_controller):
        c = make_controller()
        calls: list[int] = []
        c.subscribe(lambda: calls.append(1))
        c.update_form(group_name="")
        assert calls == [1]
        assert not c.form_valid

    def test_form_loaded_from_store_at_start(self, make_controller, valid_form):
        c = make_controller(form=valid_form)
        assert c.form == valid_form

    def test_back_keeps_response(self, make_controller):
        c = make_controller(session=_ok_session())
        asyncio.run(c.submit())
        held = c.response
        c.go_back()
        assert c.view is ViewState.FORM
        assert c.response is held

    def test_unsubscribe(self, make_controller):
        c = make_controller()
        calls: list[int] = []
        listener = lambda: calls.append(1)  # noqa: E731
        c.subscribe(listener)
        c.unsubscribe(listener)
        c.go_back()
        assert calls == []
