"""
Unit tests for the Prometheus exporter.
"""

import pytest

from service_fx_rate.app.exporters.prometheus import PrometheusExporter


class TestPrometheusExporter:
    """Test cases for PrometheusExporter."""

    @pytest.fixture
    def exporter(self):
        return PrometheusExporter()

    @pytest.mark.parametrize("value,expected", [
        (0.0, "0"),
        (1.0875, "1.0875"),
        (2.0, "2"),
        (0.1, "0.1"),
        (-0.5, "-0.5"),
        (1e-07, "0.0000001"),
        (0.00012345, "0.00012345"),
        (1.5e20, "150000000000000000000"),
        (float("nan"), "NaN"),
        (float("inf"), "+Inf"),
    ])
    def test_format_value(self, exporter, value, expected):
        assert exporter.format_value(value) == expected

    def test_export_gauge(self, exporter):
        assert exporter.export_gauge("euro_usd_rate", 1.0875) == "euro_usd_rate 1.0875\n"
