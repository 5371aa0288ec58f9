"""Process-wide server context shared by every operation handler."""

from dataclasses import dataclass, field

from .config import Config
from .metrics import MetricsCollector
from .registry import TaskRegistry


@dataclass
class ServerContext:
    """
    Everything a handler needs, constructed once at process start.

    The MCP lifespan and the HTTP routes receive the same instance by
    reference; nothing here is reachable through module globals.
    """

    config: Config = field(default_factory=Config)
    registry: TaskRegistry = field(default_factory=TaskRegistry)
    metrics: MetricsCollector = field(default_factory=MetricsCollector)
