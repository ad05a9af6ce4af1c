from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ReviewCreate(BaseModel):
    # 只接受 wire format 的 courseId
    course_id: Optional[int] = Field(None, alias="courseId")
    rating: Optional[int] = None
    comment: Optional[str] = None


class ReviewOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    course_id: int = Field(alias="courseId")
    rating: Optional[int] = None
    comment: Optional[str] = None
