"""Application metrics collection for the task manager."""

import time
from collections import Counter as CounterType
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Dict, List


@dataclass
class Metrics:
    """Application metrics collection."""

    # Operation Metrics
    operations_total: int = 0
    operations_successful: int = 0
    operations_failed: int = 0
    operation_times: List[float] = field(default_factory=list)
    operations_usage_count: CounterType[str] = field(default_factory=CounterType)

    # API Metrics
    api_requests_total: int = 0
    api_response_times: List[float] = field(default_factory=list)
    api_errors_by_endpoint: Dict[str, int] = field(default_factory=dict)

    _lock: Lock = field(default_factory=Lock, init=False)


class MetricsCollector:
    """Collects and manages application metrics."""

    def __init__(self):
        self.metrics = Metrics()
        self.start_time = time.time()

    def record_operation(self, name: str, duration: float, success: bool) -> None:
        """Record one invocation of a remote operation."""
        with self.metrics._lock:
            self.metrics.operations_total += 1
            self.metrics.operation_times.append(duration)
            self.metrics.operations_usage_count[name] += 1

            if success:
                self.metrics.operations_successful += 1
            else:
                self.metrics.operations_failed += 1

    def record_api_request(self, endpoint: str, response_time: float, success: bool) -> None:
        """Record API request metrics."""
        with self.metrics._lock:
            self.metrics.api_requests_total += 1
            self.metrics.api_response_times.append(response_time)

            if not success:
                self.metrics.api_errors_by_endpoint[endpoint] = (
                    self.metrics.api_errors_by_endpoint.get(endpoint, 0) + 1
                )

    def get_summary(self) -> Dict[str, Any]:
        """Get comprehensive metrics summary."""
        with self.metrics._lock:
            success_rate = (
                self.metrics.operations_successful / self.metrics.operations_total
                if self.metrics.operations_total > 0
                else 0
            )

            avg_operation_time = (
                sum(self.metrics.operation_times) / len(self.metrics.operation_times)
                if self.metrics.operation_times
                else 0
            )

            avg_response_time = (
                sum(self.metrics.api_response_times) / len(self.metrics.api_response_times)
                if self.metrics.api_response_times
                else 0
            )

            return {
                "operation_metrics": {
                    "operations_total": self.metrics.operations_total,
                    "operations_successful": self.metrics.operations_successful,
                    "operations_failed": self.metrics.operations_failed,
                    "success_rate": success_rate,
                    "average_operation_time_ms": avg_operation_time * 1000,
                    "operations_usage": dict(self.metrics.operations_usage_count),
                },
                "api_metrics": {
                    "requests_total": self.metrics.api_requests_total,
                    "average_response_time_ms": avg_response_time * 1000,
                    "errors_by_endpoint": dict(self.metrics.api_errors_by_endpoint),
                },
                "uptime_seconds": time.time() - self.start_time,
            }

    def reset_metrics(self) -> None:
        """Reset all metrics (useful for testing)."""
        with self.metrics._lock:
            self.metrics = Metrics()
            self.start_time = time.time()
