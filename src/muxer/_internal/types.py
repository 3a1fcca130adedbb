"""Shared type aliases used across muxer modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: called with one argument, the Request carrying path params
Handler: TypeAlias = Callable[..., Any]

# Error handler: receives (request, error?) and returns a response value
ErrorHandler: TypeAlias = Callable[..., Any]
