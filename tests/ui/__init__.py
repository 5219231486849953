"""
Browser tests for the rooming list page objects.

Run with: pytest -m ui (requires ``playwright install chromium``)
"""
