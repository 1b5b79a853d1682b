"""Upstream exchange rate ingestion."""
