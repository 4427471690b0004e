"""Base class for AJAX handlers."""

from typing import Any, Mapping, Tuple


class AbstractBase:
    """An AJAX handler answers one named method of the AJAX endpoint."""

    def handle_request(self, params: Mapping[str, Any]) -> Tuple[Any, Any]:
        """
        Handle a request.

        Returns:
            tuple: ``(result, status)`` where ``status`` is a short status string
        """
        raise NotImplementedError
