"""
Decorators shared by the API routes.
"""

from functools import wraps
from flask import jsonify, current_app, request
from typing import Callable, Any, List
from .exceptions import AppError, ValidationError


def handle_api_errors(f: Callable) -> Callable:
    """
    Convert exceptions raised by an API endpoint into JSON error responses.

    Application errors keep their own status code; anything else becomes a
    500 with a generic message and a logged traceback.
    """

    @wraps(f)
    def decorated_function(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except AppError as e:
            current_app.logger.warning(f"Application error in {f.__name__}: {e.message}")
            return jsonify(e.to_dict()), e.status_code
        except ValueError as e:
            # Bad client input such as a non-numeric page
            current_app.logger.warning(f"Client error in {f.__name__}: {str(e)}")
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            current_app.logger.error(
                f"Internal error in {f.__name__}: {str(e)}", exc_info=True
            )
            return jsonify({"success": False, "error": "Internal server error"}), 500

    return decorated_function


def validate_required_fields(required_fields: List[str]) -> Callable:
    """
    Require the listed fields in the JSON request body.

    Raises:
        ValidationError: If the body is not JSON or a field is missing
    """

    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args: Any, **kwargs: Any) -> Any:
            if not request.is_json:
                raise ValidationError("Request must be JSON")

            data = request.get_json(silent=True) or {}
            missing_fields = [field for field in required_fields if field not in data]

            if missing_fields:
                fields_str = ", ".join(missing_fields)
                raise ValidationError(f"Missing required fields: {fields_str}")

            return f(*args, **kwargs)

        return decorated_function

    return decorator
