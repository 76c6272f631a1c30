"""In-memory data access for loan applications"""

from typing import List, Optional

from lending_platform.domain.analytics import summarize
from lending_platform.domain.exceptions import ApplicationNotFoundError
from lending_platform.domain.models import ApplicationRecord, ApplicationSummary


class ApplicationRepository:
    """Applications received during the lifetime of one owner (no persistence)"""

    def __init__(self, records: Optional[List[ApplicationRecord]] = None):
        self._records: List[ApplicationRecord] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def add(self, record: ApplicationRecord) -> ApplicationRecord:
        """Append a record to the collection"""
        self._records.append(record)
        return record

    def get(self, application_id: str) -> ApplicationRecord:
        """
        Fetch a single application.

        Raises:
            ApplicationNotFoundError: If no record has this id
        """
        for record in self._records:
            if record.application_id == application_id:
                return record
        raise ApplicationNotFoundError(f"Application {application_id} not found")

    def list(self, limit: Optional[int] = None) -> List[ApplicationRecord]:
        """Most recent applications first"""
        newest_first = list(reversed(self._records))
        return newest_first[:limit] if limit is not None else newest_first

    def summary(self) -> ApplicationSummary:
        return summarize(self._records)
