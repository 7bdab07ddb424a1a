"""
Tests for the interactive widget page.
"""

from __future__ import annotations

import http.client
import threading
from typing import TYPE_CHECKING, Any
from unittest.mock import Mock, patch

import pytest

from maharashtra_weather.datasources.weather import parse_forecast
from maharashtra_weather.errors import NetworkError
from maharashtra_weather.web import WidgetRequestHandler, create_server, render_request

if TYPE_CHECKING:
    from collections.abc import Iterator


class TestRenderRequest:
    """Test page rendering per query string."""

    def test_no_query_is_idle(self) -> None:
        with patch("maharashtra_weather.widget._default_fetcher") as mock_fetch:
            html = render_request("")
        mock_fetch.assert_not_called()
        assert 'class="error-message hidden"' in html
        assert 'class="weather-card hidden"' in html

    def test_empty_city_shows_validation(self) -> None:
        with patch("maharashtra_weather.widget._default_fetcher") as mock_fetch:
            html = render_request("city=")
        mock_fetch.assert_not_called()
        assert "Please select a city first!" in html

    def test_city_is_fetched(self, forecast_payload: dict[str, Any]) -> None:
        with patch(
            "maharashtra_weather.widget._default_fetcher",
            return_value=parse_forecast(forecast_payload),
        ) as mock_fetch:
            html = render_request("city=satara")
        assert mock_fetch.call_args.args[0].id == "satara"
        assert '<h2 id="cityName" class="city-name">Satara</h2>' in html
        assert '<option value="satara" selected>Satara</option>' in html
        assert html.count('class="forecast-day"') == 9


@pytest.fixture
def live_server() -> Iterator[int]:
    server = create_server(0, host="127.0.0.1")
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server.server_address[1]
    finally:
        server.shutdown()
        server.server_close()


class TestServer:
    """Test the HTTP handler end to end."""

    def test_handler_class(self) -> None:
        server = create_server(0, host="127.0.0.1")
        try:
            assert server.RequestHandlerClass is WidgetRequestHandler
        finally:
            server.server_close()

    def test_index(self, live_server: int) -> None:
        conn = http.client.HTTPConnection("127.0.0.1", live_server)
        conn.request("GET", "/")
        resp = conn.getresponse()
        body = resp.read().decode("utf-8")
        conn.close()
        assert resp.status == 200
        assert resp.getheader("Content-Type") == "text/html; charset=utf-8"
        assert "Maharashtra Weather Hub" in body

    def test_unknown_path_is_404(self, live_server: int) -> None:
        conn = http.client.HTTPConnection("127.0.0.1", live_server)
        conn.request("GET", "/api/weather")
        resp = conn.getresponse()
        resp.read()
        conn.close()
        assert resp.status == 404

    def test_fetch_failure_page(self, live_server: int) -> None:
        fetcher = Mock(side_effect=NetworkError("HTTP Error: 502", status_code=502))
        with patch("maharashtra_weather.widget._default_fetcher", fetcher):
            conn = http.client.HTTPConnection("127.0.0.1", live_server)
            conn.request("GET", "/?city=latur")
            resp = conn.getresponse()
            body = resp.read().decode("utf-8")
            conn.close()
        assert resp.status == 200
        assert "Connection Error: HTTP Error: 502" in body
