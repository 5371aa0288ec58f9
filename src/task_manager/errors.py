"""Exception hierarchy for the task manager."""


class TaskManagerError(Exception):
    """Base class for all task manager errors."""

    pass


class TaskRegistryError(TaskManagerError):
    """Registry invariant violation. Fatal to the request, not the process."""

    pass


class TaskIdExhaustedError(TaskRegistryError):
    """Raised when the registry has issued every available task ID."""

    def __init__(self, next_id: int, max_id: int):
        super().__init__(f"Task ID space exhausted (next ID {next_id} exceeds maximum {max_id})")
        self.next_id = next_id
        self.max_id = max_id


class ConfigError(TaskManagerError, ValueError):
    """Configuration file could not be read or parsed."""

    pass
