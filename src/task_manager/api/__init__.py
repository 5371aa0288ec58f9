"""
Task Manager HTTP Service

This package serves the MCP streamable-HTTP endpoint together with a few
plain JSON endpoints for operating the server.

Architecture:
- server.py: FastAPI application setup and MCP mount
- dependencies.py: Access to the shared server context
- health.py: Health check endpoint
- version.py: Version information endpoint
- capabilities.py: Operation discovery endpoints
"""
