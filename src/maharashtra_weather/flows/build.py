"""
Prefect flow for building a static widget page.

Looks up one city and writes the rendered page, report or error message
included, to the site directory.

Run locally:
    python -m maharashtra_weather.flows.build
"""

from __future__ import annotations

from datetime import date  # noqa: TC003 (flow parameters are resolved at runtime)
from pathlib import Path
from typing import Any

from prefect import flow, task

from maharashtra_weather.config import get_settings
from maharashtra_weather.renderers.page import build_page_html
from maharashtra_weather.widget import WeatherWidget, WidgetView


# A failed lookup is rendered as an error page, not retried.
@task(name="lookup-city")
def lookup_city(city_id: str, today: date | None = None) -> WidgetView:
    """Select and fetch a city on a fresh widget."""
    widget = WeatherWidget()
    widget.select_city(city_id)
    return widget.fetch(today=today)


@task(name="render-page")
def render_page(view: WidgetView, city_id: str) -> str:
    """Render the full widget page for a view."""
    return build_page_html(view, selected_city_id=city_id)


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write HTML to site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="build-site", log_prints=True)
def build_site(
    city_id: str | None = None,
    site_dir: Path | None = None,
    today: date | None = None,
) -> dict[str, Any]:
    """
    Build a static page for one city.

    Args:
        city_id: Registry id (default: ``default_city`` from settings).
        site_dir: Output directory (default: ``site_dir`` from settings).
        today: Date for forecast badges (default: today in the city's zone).
    """
    settings = get_settings()
    city_id = city_id or settings.default_city
    site_dir = site_dir or Path(settings.site_dir)

    print(f"Looking up {city_id}...")
    view = lookup_city(city_id, today)
    if view.error:
        print(f"Warning: {view.error}")
    else:
        print(f"Fetched {len(view.forecast)} forecast days.")

    print("Rendering page...")
    html = render_page(view, city_id)

    print("Writing site...")
    output_path = write_site(html, site_dir)

    print(f"Site built: {output_path}")
    return {
        "city": city_id,
        "ok": view.error is None,
        "days": len(view.forecast),
        "output": str(output_path),
    }


if __name__ == "__main__":
    result = build_site()
    print(f"Flow complete: {result}")
