"""Task Service DTOs

Response envelope returned by the task service.
"""
from typing import Any, Optional
from pydantic import BaseModel, Field


class TaskResponse(BaseModel):
    """
    Envelope for task-service responses.

    The payload shape is owned by the task service, so every known field is
    optional and unknown fields are kept as extras.
    """
    success: Optional[bool] = None
    message: Optional[str] = None
    code: Optional[int] = None
    data: Optional[Any] = None
    completed_task_count: Optional[int] = Field(default=None, alias="completedTaskCount")
    unfinished_task_count: Optional[int] = Field(default=None, alias="unfinishedTaskCount")

    class Config:
        populate_by_name = True
        extra = "allow"
        json_schema_extra = {
            "example": {
                "success": True,
                "message": "Task counts are retrieved",
                "code": 200,
                "completedTaskCount": 3,
                "unfinishedTaskCount": 2
            }
        }
