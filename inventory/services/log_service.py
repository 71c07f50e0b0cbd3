"""
Audit log service.

Entries are stored in the ``logs`` table and mirrored to the ``inventory.audit``
logger. Writing an entry never raises: a failed write is rolled back and
reported on the application error log.
"""

from typing import List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..constants import LogTypes
from ..models import Log
from ..repositories import LogRepository
from ..utils.logging_utils import audit_logger, get_logger
from .base_service import BaseService

logger = get_logger("services.log")


def _category_tag(category: Union[LogTypes, str]) -> str:
    return category.value if isinstance(category, LogTypes) else str(category)


class LogService(BaseService):
    """Append-only audit sink."""

    def __init__(self, log_repo: Optional[LogRepository] = None, session: Optional[Session] = None):
        super().__init__(session)
        self.log_repo = log_repo or LogRepository(self.session)

    def write_log(self, category: Union[LogTypes, str], message: str) -> None:
        tag = _category_tag(category)
        try:
            self.log_repo.append(tag, message)
            self.commit()
        except SQLAlchemyError:
            self.rollback()
            logger.exception("Failed to write audit log entry [%s] %s", tag, message)
            return
        audit_logger.log_service_action(tag, message)

    def get_logs(self, category: Union[LogTypes, str, None] = None, limit: int = 200) -> List[Log]:
        """Audit entries, newest first."""
        tag = _category_tag(category) if category is not None else None
        return self.log_repo.find_recent(tag, limit)
