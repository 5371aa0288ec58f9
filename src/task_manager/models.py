"""Pydantic request/response models for the task manager."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A single unit of work held by the task registry."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Registry-assigned task identifier")
    title: str = Field(..., description="The title of the task")
    description: str = Field(..., description="A detailed description of the task")
    completed: bool = Field(False, description="Whether the task has been completed")


class AddTaskRequest(BaseModel):
    """Arguments accepted by the ``add_task`` operation."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., description="The title of the task")
    description: str = Field(..., description="A detailed description of the task")


class AddTaskResponse(BaseModel):
    """Success payload returned by the ``add_task`` operation."""

    success: bool = Field(True, description="Whether the task was added")
    task: Task = Field(..., description="The task as stored in the registry")
    message: str = Field(..., description="Human readable confirmation")

    @classmethod
    def for_task(cls, task: Task) -> "AddTaskResponse":
        """Build the confirmation payload for a newly created task."""
        return cls(
            success=True,
            task=task,
            message=f"Task '{task.title}' added successfully with ID {task.id}",
        )


class OperationParameter(BaseModel):
    """Parameter schema for a remotely invocable operation."""

    type: str = Field(..., description="Parameter type (string, integer, boolean)")
    description: str = Field(..., description="Parameter description")
    required: bool = Field(True, description="Whether parameter is required")


class OperationDefinition(BaseModel):
    """Statically declared operation with its parameter schema."""

    name: str = Field(..., description="Unique operation name")
    description: str = Field(..., description="Operation description")
    parameters: Dict[str, OperationParameter] = Field(
        default_factory=dict, description="Operation parameters"
    )

    def to_json_schema(self) -> Dict[str, object]:
        """Render the parameters as a JSON Schema object."""
        return {
            "type": "object",
            "properties": {
                name: {"type": param.type, "description": param.description}
                for name, param in self.parameters.items()
            },
            "required": [name for name, param in self.parameters.items() if param.required],
            "additionalProperties": False,
        }


class CapabilitiesResponse(BaseModel):
    """Capabilities response model."""

    operations: List[OperationDefinition] = Field(
        default_factory=list, description="Available operations"
    )
    api_version: str = Field(..., description="API version")
    features: List[str] = Field(default_factory=list, description="Supported features")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Service health status")
    version: str = Field(..., description="Service version")
    uptime: str = Field(..., description="Service uptime in human readable format")
    timestamp: datetime = Field(..., description="Current timestamp")
    task_count: Optional[int] = Field(None, description="Number of tasks in the registry")
