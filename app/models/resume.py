from sqlalchemy import Column, Date, Integer, String
from app.db.session import Base

# Fields overwritten by an update; id and timestamps are managed by the service.
MUTABLE_FIELDS = (
    "fullName",
    "email",
    "phone",
    "address",
    "summary",
    "education",
    "experience",
    "skills",
)


class Resume(Base):
    __tablename__ = "resumes"
    # ids of deleted rows must never be handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    fullName = Column(String(255))
    email = Column(String(255))
    phone = Column(String(255))
    address = Column(String(255))
    summary = Column(String(1000))
    education = Column(String(2000))
    experience = Column(String(2000))
    skills = Column(String(1000))
    createdAt = Column(Date)
    updatedAt = Column(Date)

    def __repr__(self) -> str:
        return f"<Resume id={self.id} fullName={self.fullName!r}>"
