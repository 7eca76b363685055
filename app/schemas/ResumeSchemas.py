import pydantic
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date


class ResumeBase(BaseModel):
    fullName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    summary: Optional[str] = None
    education: Optional[str] = None
    experience: Optional[str] = None
    skills: Optional[str] = None


class ResumeCreate(ResumeBase):
    pass


class ResumeUpdate(ResumeBase):
    """Full replacement of the mutable fields.

    Omitted fields arrive as None and clear the stored value; this is not a
    sparse patch.
    """


# A concrete response model that matches the row shape stored in the DB
class ResumeResponse(ResumeBase):
    id: int
    createdAt: Optional[date] = None
    updatedAt: Optional[date] = None

    model_config = pydantic.ConfigDict(from_attributes=True)


class ResumeListResponse(BaseModel):
    """Envelope response returned by GET /api/v1/resumes

    Keeps a stable shape for clients: { status, message, data }
    where data is the list of resumes.
    """
    status: int = 200
    message: str = "Resumes returned successfully"
    data: List[ResumeResponse] = Field(default_factory=list)

    model_config = pydantic.ConfigDict(from_attributes=True)


class ResumeSingleResponse(BaseModel):
    """Envelope response for single resume retrieval: { status, message, data }"""
    status: int = 200
    message: str = "Resume returned successfully"
    data: Optional[ResumeResponse] = None

    model_config = pydantic.ConfigDict(from_attributes=True)


class ResumeDeleteResponse(BaseModel):
    status: int = 200
    message: str = "Resume deleted successfully"
    data: None = None
