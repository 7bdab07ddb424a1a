"""
Interactive widget page over ``http.server``.

``GET /`` shows the city picker. ``GET /?city=<id>`` selects that city and
fetches it before the page is rendered, so the response already carries
either the report or the error message.
"""

from __future__ import annotations

import http.server
import logging
from urllib.parse import parse_qs, urlsplit

from maharashtra_weather.renderers.page import build_page_html
from maharashtra_weather.widget import WeatherWidget

logger = logging.getLogger(__name__)

PAGE_PATHS = ("/", "/index.html")


def render_request(query: str) -> str:
    """Build the page for a request query string."""
    params = parse_qs(query, keep_blank_values=True)
    widget = WeatherWidget()
    if "city" in params:
        widget.select_city(params["city"][0])
        widget.fetch()
    return build_page_html(widget.view, selected_city_id=widget.selected_city_id)


class WidgetRequestHandler(http.server.BaseHTTPRequestHandler):
    """Serves the widget page; everything else is 404."""

    server_version = "maharashtra-weather"

    def do_GET(self) -> None:  # noqa: N802 (http.server naming)
        parts = urlsplit(self.path)
        if parts.path not in PAGE_PATHS:
            self.send_error(404)
            return

        body = render_request(parts.query).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        logger.info("%s - %s", self.address_string(), format % args)


def create_server(port: int, host: str = "") -> http.server.HTTPServer:
    """Bind the widget server. One request at a time."""
    return http.server.HTTPServer((host, port), WidgetRequestHandler)
