import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.resume import Resume

logger = logging.getLogger(__name__)


class ResumeRepository:
    """SQLAlchemy-backed storage for Resume rows.

    Every write commits immediately, so changes are visible to any later
    call. Database errors roll the session back and propagate unchanged.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Resume]:
        return self.db.query(Resume).order_by(Resume.id).all()

    def find_by_id(self, resume_id: int) -> Optional[Resume]:
        return self.db.get(Resume, resume_id)

    def save(self, resume: Resume) -> Resume:
        """Insert when ``resume.id`` is unset, otherwise upsert by id.

        An upsert onto an existing row replaces every column, so attributes
        left unset on ``resume`` are stored as NULL.
        """
        try:
            existing = None if resume.id is None else self.db.get(Resume, resume.id)
            if existing is None:
                self.db.add(resume)
            elif existing is not resume:
                for column in Resume.__table__.columns:
                    setattr(existing, column.key, getattr(resume, column.key))
                resume = existing
            self.db.commit()
            self.db.refresh(resume)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error saving resume: {e}")
            raise
        return resume

    def delete(self, resume: Resume) -> None:
        """Remove the row with the resume's id; no-op if it is already gone."""
        persisted = self.db.get(Resume, resume.id)
        if persisted is None:
            return
        try:
            self.db.delete(persisted)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting resume {resume.id}: {e}")
            raise
