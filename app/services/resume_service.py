"""
Resume Service

Entity operations for resumes: existence checks, timestamp stamping and the
full-replace update policy. Storage is supplied by the caller.
"""

import logging
from datetime import date
from typing import Any, Callable, List, Optional

from app.crud.crud_resume import ResumeRepository
from app.models.resume import MUTABLE_FIELDS, Resume

logger = logging.getLogger(__name__)


class ResumeNotFoundError(LookupError):
    """Raised when an update or delete targets an id with no stored resume."""

    def __init__(self, resume_id: int):
        self.resume_id = resume_id
        super().__init__(f"Resume not found with id: {resume_id}")


class ResumeService:
    def __init__(self, repository: ResumeRepository, today: Callable[[], date] = date.today):
        self.repository = repository
        self.today = today

    def get_all_resumes(self) -> List[Resume]:
        return self.repository.find_all()

    def get_resume_by_id(self, resume_id: int) -> Optional[Resume]:
        """Return the resume, or None when no record exists for the id."""
        return self.repository.find_by_id(resume_id)

    def create_resume(self, resume: Any) -> Resume:
        """Persist a new resume with a storage-assigned id.

        Only the mutable fields are read from ``resume`` (a Resume or a
        ResumeCreate); they are copied onto a fresh row, so the caller's
        object and any id it carries are left alone. Both timestamps are
        stamped with today's date.
        """
        today = self.today()
        new_resume = Resume(**{field: getattr(resume, field, None) for field in MUTABLE_FIELDS})
        new_resume.createdAt = new_resume.updatedAt = today
        saved = self.repository.save(new_resume)
        logger.info(f"Resume created with id: {saved.id}")
        return saved

    def update_resume(self, resume_id: int, patch: Any) -> Resume:
        """Overwrite every mutable field of the stored resume with ``patch``.

        ``patch`` may be a Resume or a ResumeUpdate; fields it leaves empty
        are written as empty too. ``id`` and ``createdAt`` are kept.

        Raises:
            ResumeNotFoundError: If no resume exists for ``resume_id``
        """
        resume = self._get_existing(resume_id)

        for field in MUTABLE_FIELDS:
            setattr(resume, field, getattr(patch, field, None))
        resume.updatedAt = self.today()

        saved = self.repository.save(resume)
        logger.info(f"Resume {resume_id} updated")
        return saved

    def delete_resume(self, resume_id: int) -> None:
        """
        Raises:
            ResumeNotFoundError: If no resume exists for ``resume_id``
        """
        resume = self._get_existing(resume_id)
        self.repository.delete(resume)
        logger.info(f"Resume {resume_id} deleted")

    def _get_existing(self, resume_id: int) -> Resume:
        resume = self.repository.find_by_id(resume_id)
        if resume is None:
            logger.warning(f"Resume not found with id: {resume_id}")
            raise ResumeNotFoundError(resume_id)
        return resume
