"""
Handler decorators for error handling, logging, and response formatting.
"""
import functools
import traceback
import uuid
from typing import Any, Callable, Dict

from logger_config import get_logger
from utils.exceptions import QueryAPIError, ServiceError

logger = get_logger(__name__)


def _error_response(
    correlation_id: str,
    handler_name: str,
    error: Dict[str, Any]
) -> Dict[str, Any]:
    error["correlation_id"] = correlation_id
    return {
        "error": error,
        "metadata": {
            "correlation_id": correlation_id,
            "handler": handler_name
        }
    }


def lambda_handler(
    func: Callable[[Any, Any], Dict[str, Any]]
) -> Callable[[Any, Any], Dict[str, Any]]:
    """
    Decorator for Lambda handler functions.

    Provides:
    - Request correlation IDs for logging
    - Structured error responses for service, validation and unexpected errors
    - Response metadata

    Args:
        func: The handler function to decorate

    Returns:
        Decorated handler function
    """
    @functools.wraps(func)
    def wrapper(event: Any, context: Any) -> Dict[str, Any]:
        correlation_id = str(uuid.uuid4())

        logger.info(
            f"Handler {func.__name__} invoked",
            extra={
                "correlation_id": correlation_id,
                "handler": func.__name__,
                "request_id": getattr(context, "aws_request_id", None) if context else None
            }
        )

        try:
            result = func(event or {}, context)
        except ServiceError as e:
            logger.warning(
                f"Handler {func.__name__} got service error: {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _error_response(correlation_id, func.__name__, {
                "type": "ServiceError",
                "message": e.message,
                "code": e.code,
                "status_code": e.status_code,
                "request_id": e.request_id,
            })
        except QueryAPIError as e:
            logger.error(
                f"Handler {func.__name__} failed: {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _error_response(correlation_id, func.__name__, {
                "type": type(e).__name__,
                "message": str(e),
            })
        except ValueError as e:
            logger.warning(
                f"Handler {func.__name__} validation error: {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _error_response(correlation_id, func.__name__, {
                "type": "ValidationError",
                "message": str(e),
            })
        except Exception as e:
            logger.error(
                f"Handler {func.__name__} failed: {str(e)}",
                extra={
                    "correlation_id": correlation_id,
                    "traceback": traceback.format_exc()
                },
                exc_info=True
            )
            return _error_response(correlation_id, func.__name__, {
                "type": type(e).__name__,
                "message": str(e),
            })

        result.setdefault("metadata", {})["correlation_id"] = correlation_id
        logger.info(
            f"Handler {func.__name__} completed successfully",
            extra={"correlation_id": correlation_id}
        )
        return result

    return wrapper
