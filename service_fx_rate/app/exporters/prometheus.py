"""
Prometheus exporter for FX Rate Service.
"""

import math
from decimal import Decimal


CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


class PrometheusExporter:
    """Renders gauge values in the Prometheus text exposition format."""

    def export_gauge(self, name: str, value: float) -> str:
        """Export a single unlabelled sample line."""
        return f"{name} {self.format_value(value)}\n"

    def format_value(self, value: float) -> str:
        """Shortest round-trip digits in positional notation; integral values drop the fraction."""
        value = float(value)
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        if value.is_integer():
            return str(int(value))
        # repr() switches to exponent form below 1e-4
        return format(Decimal(repr(value)), "f")
