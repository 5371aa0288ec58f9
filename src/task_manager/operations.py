"""Operation catalog and handlers exposed to remote callers."""

import logging
import time
from typing import Dict, List

from .context import ServerContext
from .models import AddTaskRequest, AddTaskResponse, OperationDefinition, OperationParameter

logger = logging.getLogger(__name__)

ADD_TASK_OPERATION = OperationDefinition(
    name="add_task",
    description="Add a new task to the task manager",
    parameters={
        "title": OperationParameter(
            type="string", description="The title of the task", required=True
        ),
        "description": OperationParameter(
            type="string", description="A detailed description of the task", required=True
        ),
    },
)

_OPERATIONS: Dict[str, OperationDefinition] = {
    ADD_TASK_OPERATION.name: ADD_TASK_OPERATION,
}


def list_operations() -> List[OperationDefinition]:
    """List all operations in declaration order."""
    return list(_OPERATIONS.values())


def get_operation(name: str) -> OperationDefinition:
    """Get operation definition by name.

    Args:
        name: Operation name

    Returns:
        Operation definition

    Raises:
        KeyError: If operation not found
    """
    if name not in _OPERATIONS:
        raise KeyError(f"Operation '{name}' not found")
    return _OPERATIONS[name]


def add_task(context: ServerContext, request: AddTaskRequest) -> AddTaskResponse:
    """
    Create a task in the shared registry and shape the confirmation payload.

    Args:
        context: Shared server context
        request: Decoded ``add_task`` arguments

    Returns:
        Success payload with the stored task and a confirmation message

    Raises:
        TaskRegistryError: If the registry cannot issue another ID
    """
    start_time = time.perf_counter()
    success = False
    try:
        task = context.registry.create_task(request.title, request.description)
        success = True
    finally:
        context.metrics.record_operation(
            ADD_TASK_OPERATION.name, time.perf_counter() - start_time, success
        )

    logger.info(f"Task '{task.title}' added with ID {task.id}")
    return AddTaskResponse.for_task(task)
