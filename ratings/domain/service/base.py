"""Base service class for domain services."""

from typing import Any

import logfire


class Service:
    """Base class for domain services.

    Domain services hold the rules that do not belong to a single entity.
    """

    def span(self, operation: str, **attributes: Any):
        """Open a logfire span named after the service and operation."""
        name = f"{type(self).__name__}.{operation}"
        return logfire.span(name, **attributes)
