"""
Prefect flows for the static dashboard.

Flows:
- build: Calculate statistics from stored settings and render site/index.html

Usage (local):
    python -m life_clock.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'build-site/default'
"""
