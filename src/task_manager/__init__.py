"""
Task Manager - In-memory task registry served over the Model Context Protocol.

This package provides:
- A concurrency-safe task registry with monotonically increasing IDs
- The ``add_task`` MCP tool and its statically declared schema
- A FastAPI service mounting the MCP streamable-HTTP endpoint
- A command-line entry point for running the server
"""

__version__ = "0.1.0"
