"""
Coin Listing API Tests

Runs the FastAPI app against a fake coin service.
"""

import asyncio
import logging

import pytest
from fastapi.testclient import TestClient

from crypto_list.core.exceptions import ServerError
from crypto_list.main import create_app, log_load_failure

from conftest import FakeCoinService


@pytest.fixture
def client(service):
    return TestClient(create_app(service=service))


def symbols(body):
    return [c["symbol"] for c in body["coins"]]


class TestState:

    def test_state_before_load_is_idle(self, client):
        response = client.get("/coins/state")

        assert response.status_code == 200
        assert response.json()["status"] == "idle"
        assert response.json()["coins"] is None

    def test_load_returns_coins(self, client):
        body = client.post("/coins/load").json()

        assert body["status"] == "loaded"
        assert body["count"] == 3
        assert symbols(body) == ["BTC", "ETH", "XRP"]
        assert body["coins"][0] == {
            "name": "Bitcoin",
            "symbol": "BTC",
            "type": "coin",
            "is_active": True,
            "is_new": False,
        }
        assert body["alert"] is None

    def test_load_failure_returns_error_and_alert(self):
        client = TestClient(create_app(service=FakeCoinService(error=ServerError("down"))))

        body = client.post("/coins/load").json()

        assert body["status"] == "error"
        assert body["error"] == {"kind": "ServerError", "message": "down"}
        assert body["alert"] == {"kind": "ServerError", "title": "down", "action": "dismiss"}

    def test_state_reflects_latest_action(self, client):
        client.post("/coins/load")
        client.put("/coins/search", json={"text": "ETH"})

        body = client.get("/coins/state").json()

        assert symbols(body) == ["ETH"]
        assert body["search_text"] == "ETH"


class TestSearchAndFilters:

    def test_search(self, client):
        client.post("/coins/load")

        body = client.put("/coins/search", json={"text": "Rip"}).json()

        assert symbols(body) == ["XRP"]

    def test_toggle_filter(self, client):
        client.post("/coins/load")

        on = client.post("/coins/filters/active/toggle").json()
        off = client.post("/coins/filters/active/toggle").json()

        assert on["count"] == 2
        assert on["active_filters"] == ["active"]
        assert off["count"] == 3
        assert off["active_filters"] == []

    def test_unknown_filter_is_rejected(self, client):
        response = client.post("/coins/filters/shiny/toggle")

        assert response.status_code == 422

    def test_set_and_clear_filters(self, client):
        client.post("/coins/load")

        body = client.put("/coins/filters", json={"filters": ["new", "active"]}).json()
        assert symbols(body) == ["ETH"]
        assert body["active_filters"] == ["active", "new"]

        body = client.delete("/coins/filters").json()
        assert body["count"] == 3
        assert body["active_filters"] == []

    def test_empty_filtered_result_offers_clear(self, client):
        client.post("/coins/load")

        body = client.put("/coins/filters", json={"filters": ["active", "inActive"]}).json()

        assert body["count"] == 0
        assert body["alert"]["kind"] == "EmptyDataWithFilteredAppliedError"
        assert body["alert"]["action"] == "clear_filters"

    def test_empty_search_result_has_no_alert(self, client):
        client.post("/coins/load")
        client.post("/coins/filters/active/toggle")

        body = client.put("/coins/search", json={"text": "DOGE"}).json()

        assert body["count"] == 0
        assert body["alert"] is None

    def test_filter_menu(self, client):
        client.post("/coins/filters/coin/toggle")

        menu = client.get("/coins/filters").json()

        assert [m["label"] for m in menu] == [
            "Active Coins", "New Coins", "Only Coin", "InActive Coins", "Only Token"
        ]
        assert [m["filter"] for m in menu if m["selected"]] == ["coin"]


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


class TestStartupLoad:

    def run_task(self, coro_factory, cancel=False):
        async def scenario():
            task = asyncio.create_task(coro_factory())
            task.add_done_callback(log_load_failure)
            if cancel:
                task.cancel()
            await asyncio.gather(task, return_exceptions=True)
            await asyncio.sleep(0)
        asyncio.run(scenario())

    def test_failure_is_logged(self, caplog):
        async def boom():
            raise ZeroDivisionError("bad feed")

        with caplog.at_level(logging.ERROR, logger="crypto_list.main"):
            self.run_task(boom)

        assert "Initial coin load failed" in caplog.text
        assert caplog.records[-1].exc_info[0] is ZeroDivisionError

    def test_success_and_cancel_are_not_logged(self, caplog):
        async def ok():
            await asyncio.sleep(0)

        with caplog.at_level(logging.ERROR, logger="crypto_list.main"):
            self.run_task(ok)
            self.run_task(ok, cancel=True)

        assert caplog.records == []
