"""HealthCalc Services.

Services:
    build_tip_request: Format a calculator result and its input for the tip service.
"""
from services.tip_formatter import build_tip_request, format_result, format_user_data

__all__ = ["build_tip_request", "format_result", "format_user_data"]
