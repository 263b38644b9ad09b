import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_operation(session, operation, message):
    """Roll back and re-raise database failures as StorageError.

    ``operation`` names the failing call in the server log, ``message`` is what
    the client gets back.
    """
    try:
        yield
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error %s", operation)
        raise StorageError(message)


from .appointment_store import AppointmentStore  # noqa: E402
from .account_store import AccountStore  # noqa: E402
