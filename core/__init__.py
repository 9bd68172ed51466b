"""HealthCalc Core: logging, tracing and metrics."""
