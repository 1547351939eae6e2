"""Course and course-selection schemas"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum

class CourseStatus(str, Enum):
    """Moderation states of a course"""
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"

class CourseCreate(BaseModel):
    """Instructor course submission"""
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, description="Course name")
    image: Optional[str] = Field(None, description="Cover image URL")
    instructorName: Optional[str] = Field(None, description="Instructor display name")
    instructorEmail: str = Field(..., min_length=1, description="Instructor email")
    price: float = Field(..., ge=0, description="Course price")
    availableSeats: int = Field(..., ge=0, description="Seats left")

class CourseFeedback(BaseModel):
    """Admin feedback on a course, usually after a denial"""
    feedback: str = Field(..., description="Feedback text")

class SelectedCourseCreate(BaseModel):
    """A student's course selection; course snapshot fields are stored as sent"""
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1, description="Student email")
    courseId: str = Field(..., description="Selected course identifier")
