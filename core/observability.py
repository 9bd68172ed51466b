"""Observability Module - Logging, Tracing, and Metrics

This module provides:
1. Structured logging with context
2. Stage execution tracing (calculators and tip generation)
3. Performance metrics collection
"""
import logging
import functools
from typing import Dict, Any, Optional, Callable
from dataclasses import dataclass, field
from datetime import datetime

from config.settings import LOG_LEVEL

# Configure structured logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger("healthcalc")


@dataclass
class StageTrace:
    """Represents a single stage execution trace."""
    stage_name: str
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    duration_ms: Optional[float] = None
    input_summary: str = ""
    success: bool = True
    error: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def complete(self, success: bool = True, error: str = None):
        """Mark trace as complete."""
        self.end_time = datetime.now()
        self.duration_ms = (self.end_time - self.start_time).total_seconds() * 1000
        self.success = success
        self.error = error


@dataclass
class CalculationMetrics:
    """Aggregated metrics for calculations and tip requests."""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    total_latency_ms: float = 0
    stage_latencies: Dict[str, list] = field(default_factory=dict)
    calculations: Dict[str, int] = field(default_factory=dict)
    tip_fallbacks: int = 0

    @property
    def success_rate(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return self.successful_requests / self.total_requests

    @property
    def avg_latency_ms(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return self.total_latency_ms / self.total_requests

    def record(self, trace: StageTrace):
        """Record a trace into metrics."""
        self.total_requests += 1
        if trace.success:
            self.successful_requests += 1
        else:
            self.failed_requests += 1

        if trace.duration_ms:
            self.total_latency_ms += trace.duration_ms
            self.stage_latencies.setdefault(trace.stage_name, []).append(trace.duration_ms)

    def record_calculation(self, calculator_type: str):
        """Count one computed result for a calculator."""
        self.calculations[calculator_type] = self.calculations.get(calculator_type, 0) + 1

    def record_tip_fallback(self):
        self.tip_fallbacks += 1

    def reset(self):
        """Clear all counters (used between evaluation runs)."""
        self.total_requests = 0
        self.successful_requests = 0
        self.failed_requests = 0
        self.total_latency_ms = 0
        self.stage_latencies = {}
        self.calculations = {}
        self.tip_fallbacks = 0

    def summary(self) -> Dict[str, Any]:
        """Return metrics summary."""
        stage_avg = {}
        for stage, latencies in self.stage_latencies.items():
            if latencies:
                stage_avg[stage] = sum(latencies) / len(latencies)

        return {
            "total_requests": self.total_requests,
            "success_rate": f"{self.success_rate:.1%}",
            "avg_latency_ms": f"{self.avg_latency_ms:.0f}ms",
            "stage_avg_latency": stage_avg,
            "calculations": dict(self.calculations),
            "tip_fallbacks": self.tip_fallbacks,
        }


# Global metrics instance
metrics = CalculationMetrics()


class Tracer:
    """Context manager for tracing a pipeline stage."""

    def __init__(self, stage_name: str, input_data: Any = None):
        self.trace = StageTrace(stage_name=stage_name)
        if input_data:
            self.trace.input_summary = str(input_data)[:200]

    def __enter__(self):
        logger.info(f"▶ {self.trace.stage_name} started")
        return self.trace

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.trace.complete(success=False, error=str(exc_val))
            logger.error(f"✖ {self.trace.stage_name} failed: {exc_val}")
        else:
            self.trace.complete(success=True)
            logger.info(f"✔ {self.trace.stage_name} completed in {self.trace.duration_ms:.0f}ms")

        metrics.record(self.trace)
        return False  # Don't suppress exceptions


def trace_agent(func: Callable) -> Callable:
    """Decorator to automatically trace agent methods."""
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        stage_name = self.__class__.__name__
        with Tracer(stage_name, args[0] if args else None):
            return func(self, *args, **kwargs)
    return wrapper


def log_context(payload: Dict[str, Any], stage: str):
    """Log a tip request/response payload at a specific stage."""
    logger.debug(f"[{stage}] Payload keys: {list(payload.keys())}")

    if "calculatorResult" in payload:
        logger.debug(f"[{stage}] {payload.get('calculatorType')}: {payload['calculatorResult']}")

    if "healthTips" in payload:
        logger.debug(f"[{stage}] Tips count: {len(payload['healthTips'] or [])}")


def get_metrics_summary() -> Dict[str, Any]:
    """Get current metrics summary for dashboard/CLI."""
    return metrics.summary()
