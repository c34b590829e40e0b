"""
Pydantic schemas for Interest API requests/responses.
"""

from pydantic import BaseModel


class InterestRequest(BaseModel):
    """Body of create and update requests"""
    interest: str


class InterestResponse(BaseModel):
    """Schema for interest response"""
    id: int
    interest: str

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


# 404 detail sent for an unknown interest id
INTEREST_NOT_FOUND_DETAIL = "Interest not found"
