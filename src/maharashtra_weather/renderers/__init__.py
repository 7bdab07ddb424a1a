"""Pure rendering functions: structured data -> view records -> HTML.

All renderers follow the same pattern:
  - Input: validated models (from datasources/) or view records
  - Output: pydantic view records (report.py) or HTML fragments (page.py)
  - No side effects, no I/O

Used by widget.py, web.py and flows/build.py.

Public API:
  - report: build_report, build_current_view, build_forecast_views, format_report_text
  - page: build_page_html, build_weather_card_html, build_forecast_html
  - weather_utils: round_half_up, format_temperature, format_wind_speed, ...
  - date_utils: format_update_time, day_name, short_date

Templates live in ``templates/``. Fragments carry no <html>/<body> tags;
``page.html.j2`` holds the layout and CSS.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
