"""
Prefect flows.

Flows:
- build: Look up one city and write a static widget page

Usage (local):
    python -m maharashtra_weather.flows.build
    maharashtra-weather build --city pune

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m maharashtra_weather.flows.build
"""
