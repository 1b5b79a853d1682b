"""
FX Rate service package.

Polls an upstream currency API for the EUR/USD rate in a background task,
keeps the latest value in memory, and serves it for Prometheus scraping on
the `/metrics` endpoint.
"""
