"""
CLI Module.

Command-line client built with Click for the line status API.

- main.py: command definition and the fetch/filter/render pipeline
- client.py: HTTP client (httpx)
- render.py: table and JSON renderers

Usage:
    tpsp --help
    tpsp metro --json
"""
