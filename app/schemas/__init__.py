from .ResumeSchemas import (
	ResumeBase,
	ResumeCreate,
	ResumeUpdate,
	ResumeResponse,
	ResumeListResponse,
	ResumeSingleResponse,
	ResumeDeleteResponse,
)

__all__ = [
	"ResumeBase",
	"ResumeCreate",
	"ResumeUpdate",
	"ResumeResponse",
	"ResumeListResponse",
	"ResumeSingleResponse",
	"ResumeDeleteResponse",
]
