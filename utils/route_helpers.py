"""
Shared route helper utilities.

Reduces boilerplate in routes.py for manager operations.
"""
import logging
from typing import Any, Callable

from fastapi import HTTPException


def manager_operation(
    operation: Callable[[], Any],
    error_context: str = "operation",
) -> Any:
    """
    Run a manager operation with standard error handling.

    Args:
        operation: Callable performing the operation
        error_context: Context string for error logging

    Returns:
        Whatever the operation returns

    Raises:
        HTTPException: 400 for invalid input, 404 for unknown names, 500 otherwise
    """
    try:
        return operation()
    except HTTPException:
        raise
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]) if e.args else str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logging.error(f"Failed to {error_context}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
