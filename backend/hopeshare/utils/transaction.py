import logging
from contextlib import contextmanager
from hopeshare.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(label=None):
    """
    One unit of work: commit on success, roll back and re-raise on error.
    Collection writes only flush, so several of them can share one block.
    """
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        if label:
            logger.warning("Rolled back %s", label)
        raise
