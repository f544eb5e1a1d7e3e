"""Unit tests for the entry point wiring."""
import functools
import logging

import httpx
import pytest

from btc_price_alert import main
from btc_price_alert.config import MonitorSettings
from btc_price_alert.providers.crypto.kraken import KrakenProvider
from btc_price_alert.services import run_monitor


@pytest.fixture
def kraken_stub(monkeypatch):
    """Route KrakenProvider through a MockTransport and bound the loop to two cycles."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        payload = {"error": [], "result": {"XXBTZUSD": {"c": ["50000.0", "1"]}}}
        return httpx.Response(200, json=payload)

    monkeypatch.setattr(
        main,
        "KrakenProvider",
        functools.partial(KrakenProvider, transport=httpx.MockTransport(handler)),
    )
    monkeypatch.setattr(main, "run_monitor", functools.partial(run_monitor, max_cycles=2))
    return requests


async def test_monitor_wires_provider_and_sink_from_settings(kraken_stub, caplog, tmp_path):
    sound = tmp_path / "beep.wav"
    settings = MonitorSettings(
        pair="xbtusd",
        poll_interval_seconds=0.001,
        alert_sound_path=sound,
    )
    with caplog.at_level(logging.INFO):
        await main.monitor(settings)

    assert len(kraken_stub) == 2
    assert all(r.url.params["pair"] == "XBTUSD" for r in kraken_stub)
    assert f"Watching XBTUSD, alert sound {sound}" in caplog.text
    assert "Current BTC price: $50000.00" in caplog.text


def test_run_logs_stop_on_keyboard_interrupt(monkeypatch, caplog):
    def interrupted(coro):
        coro.close()
        raise KeyboardInterrupt

    async def fake_monitor(settings):
        pass

    monkeypatch.setattr(main, "monitor", fake_monitor)
    monkeypatch.setattr(main.asyncio, "run", interrupted)
    monkeypatch.setattr(main, "configure_logging", lambda level: None)

    with caplog.at_level(logging.INFO):
        main.run()

    assert "Starting Bitcoin Price Monitor" in caplog.text
    assert "Stopped" in caplog.text


def test_run_passes_env_settings_to_monitor(monkeypatch):
    seen: list[MonitorSettings] = []

    async def fake_monitor(settings):
        seen.append(settings)

    monkeypatch.setenv("PRICE_ALERT_THRESHOLD", "0.02")
    monkeypatch.setattr(main, "monitor", fake_monitor)
    monkeypatch.setattr(main, "configure_logging", lambda level: None)

    main.run()

    assert len(seen) == 1
    assert seen[0].alert_threshold == 0.02


def test_configure_logging_quiets_httpx(monkeypatch):
    httpx_logger = logging.getLogger("httpx")
    monkeypatch.setattr(httpx_logger, "level", logging.NOTSET)
    main.configure_logging("debug")
    assert httpx_logger.level == logging.WARNING
