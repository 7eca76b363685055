from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.crud.crud_resume import ResumeRepository
from app.db.session import get_db
from app.schemas.ResumeSchemas import (
    ResumeCreate,
    ResumeDeleteResponse,
    ResumeListResponse,
    ResumeSingleResponse,
    ResumeUpdate,
)
from app.services.resume_service import ResumeNotFoundError, ResumeService

router = APIRouter()


def get_resume_service(db: Session = Depends(get_db)) -> ResumeService:
    return ResumeService(ResumeRepository(db))


@router.get("/", response_model=ResumeListResponse)
def read_resumes(service: ResumeService = Depends(get_resume_service)):
    resumes = service.get_all_resumes()
    return {"status": 200, "message": "Resumes returned successfully", "data": resumes}


@router.get("/{resume_id}", response_model=ResumeSingleResponse)
def read_resume(resume_id: int, service: ResumeService = Depends(get_resume_service)):
    resume = service.get_resume_by_id(resume_id)
    if resume is None:
        raise HTTPException(status_code=404, detail=f"Resume not found with id: {resume_id}")

    return {"status": 200, "message": "Resume returned successfully", "data": resume}


@router.post("/", response_model=ResumeSingleResponse, status_code=status.HTTP_201_CREATED)
def create_resume(payload: ResumeCreate, service: ResumeService = Depends(get_resume_service)):
    resume = service.create_resume(payload)
    return {"status": 201, "message": "Resume created successfully", "data": resume}


@router.put("/{resume_id}", response_model=ResumeSingleResponse)
def update_resume(
    resume_id: int,
    payload: ResumeUpdate,
    service: ResumeService = Depends(get_resume_service),
):
    """
    Replace every editable field of a resume.

    Fields missing from the body are cleared, not kept.
    """
    try:
        resume = service.update_resume(resume_id, payload)
    except ResumeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"status": 200, "message": "Resume updated successfully", "data": resume}


@router.delete("/{resume_id}", response_model=ResumeDeleteResponse)
def delete_resume(resume_id: int, service: ResumeService = Depends(get_resume_service)):
    try:
        service.delete_resume(resume_id)
    except ResumeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"status": 200, "message": "Resume deleted successfully", "data": None}
