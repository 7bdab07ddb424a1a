"""
Tests for the static page build flow.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any
from unittest.mock import Mock, patch

from maharashtra_weather.datasources.weather import parse_forecast
from maharashtra_weather.errors import NetworkError
from maharashtra_weather.flows import build
from maharashtra_weather.widget import WidgetView

if TYPE_CHECKING:
    from pathlib import Path

    import pytest

TODAY = date(2024, 6, 10)


class TestLookupCity:
    """Test the lookup task."""

    def test_lookup_success(self, forecast_payload: dict[str, Any]) -> None:
        with patch(
            "maharashtra_weather.widget._default_fetcher",
            return_value=parse_forecast(forecast_payload),
        ):
            view = build.lookup_city.fn("jalna", TODAY)
        assert view.error is None
        assert view.current is not None
        assert view.current.city_name == "Jalna"
        assert len(view.forecast) == 9

    def test_lookup_failure_is_an_error_view(self) -> None:
        fetcher = Mock(side_effect=NetworkError("HTTP Error: 500", status_code=500))
        with patch("maharashtra_weather.widget._default_fetcher", fetcher):
            view = build.lookup_city.fn("jalna", TODAY)
        assert view.current is None
        assert view.error is not None


class TestRenderAndWrite:
    """Test rendering and writing the page."""

    def test_render_page(self) -> None:
        html = build.render_page.fn(WidgetView(error="boom"), "beed")
        assert '<option value="beed" selected>Beed</option>' in html
        assert "boom" in html

    def test_write_site(self, tmp_path: Path) -> None:
        output = build.write_site.fn("<html></html>", tmp_path / "site")
        assert output == tmp_path / "site" / "index.html"
        assert output.read_text(encoding="utf-8") == "<html></html>"


class TestBuildSite:
    """Test the flow body with tasks replaced by their functions."""

    def _use_plain_tasks(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(build, "lookup_city", build.lookup_city.fn)
        monkeypatch.setattr(build, "render_page", build.render_page.fn)
        monkeypatch.setattr(build, "write_site", build.write_site.fn)

    def test_build_site(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        forecast_payload: dict[str, Any],
    ) -> None:
        self._use_plain_tasks(monkeypatch)
        with patch(
            "maharashtra_weather.widget._default_fetcher",
            return_value=parse_forecast(forecast_payload),
        ):
            result = build.build_site.fn("latur", tmp_path, TODAY)

        assert result == {
            "city": "latur",
            "ok": True,
            "days": 9,
            "output": str(tmp_path / "index.html"),
        }
        html = (tmp_path / "index.html").read_text(encoding="utf-8")
        assert "Latur" in html
        assert "Today" in html

    def test_build_site_defaults_from_settings(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        forecast_payload: dict[str, Any],
    ) -> None:
        self._use_plain_tasks(monkeypatch)
        monkeypatch.setenv("MAHARASHTRA_WEATHER_DEFAULT_CITY", "sangli")
        monkeypatch.setenv("MAHARASHTRA_WEATHER_SITE_DIR", str(tmp_path / "out"))
        build.get_settings.cache_clear()
        try:
            with patch(
                "maharashtra_weather.widget._default_fetcher",
                return_value=parse_forecast(forecast_payload),
            ):
                result = build.build_site.fn(today=TODAY)
        finally:
            build.get_settings.cache_clear()

        assert result["city"] == "sangli"
        assert result["output"] == str(tmp_path / "out" / "index.html")

    def test_build_site_with_failed_lookup(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        self._use_plain_tasks(monkeypatch)
        fetcher = Mock(side_effect=NetworkError("HTTP Error: 500", status_code=500))
        with patch("maharashtra_weather.widget._default_fetcher", fetcher):
            result = build.build_site.fn("latur", tmp_path, TODAY)

        assert result["ok"] is False
        assert result["days"] == 0
        assert "Connection Error" in (tmp_path / "index.html").read_text(encoding="utf-8")
