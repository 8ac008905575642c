"""ECS Stability Waiter Shared Package.

This package contains components shared by the action entry point:
- models: Pydantic data models
- config: Configuration management
- observability: Structured logging
"""

__version__ = "0.1.0"
