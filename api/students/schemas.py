from __future__ import annotations

from pydantic import BaseModel, Field


class StudentListResponse(BaseModel):
    student_list: list[str] = Field(..., alias="studentList")
