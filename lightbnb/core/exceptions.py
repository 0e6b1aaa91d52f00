"""
Typed errors raised by the data-access layer.

Not-found is never an error: single-record lookups return None and list
operations return an empty list.
"""
import logging
from contextlib import asynccontextmanager

from sqlalchemy import exc

logger = logging.getLogger(__name__)


class DataAccessError(RuntimeError):
    """Base class for failures while talking to the database."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.message = message


class DatabaseUnavailableError(DataAccessError):
    """The database could not be reached or the connection dropped."""


class ConstraintViolationError(DataAccessError):
    """A unique, foreign-key or not-null constraint rejected the statement."""


class QueryError(DataAccessError):
    """The statement was rejected by the database (syntax, unknown column, ...)."""


def classify_error(error: BaseException) -> type[DataAccessError]:
    """Map a driver or SQLAlchemy exception onto the error taxonomy."""
    if isinstance(error, exc.IntegrityError):
        return ConstraintViolationError
    if isinstance(error, (exc.OperationalError, exc.InterfaceError, exc.DisconnectionError, exc.TimeoutError, OSError)):
        return DatabaseUnavailableError
    if isinstance(error, exc.DBAPIError) and error.connection_invalidated:
        return DatabaseUnavailableError
    return QueryError


@asynccontextmanager
async def translate_errors(operation: str):
    """
    Re-raise database failures inside the block as DataAccessError subclasses.

    Args:
        operation: Name of the data-access operation, used in logs and messages
    """
    try:
        yield
    except (exc.SQLAlchemyError, OSError) as e:
        error_class = classify_error(e)
        message = str(getattr(e, "orig", None) or e)
        logger.error(f"Database error during {operation}: {message}")
        raise error_class(operation, message) from e
