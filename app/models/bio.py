from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


class BioUpdate(BaseModel):
    content: str  # HTML produit par l'éditeur riche de l'admin

    @field_validator("content")
    @classmethod
    def check_content(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Bio content is required")
        return value


class BioInDB(BaseModel):
    id: str = Field(..., alias="_id")
    content: str
    updated_at: Optional[datetime] = None

    class Config:
        populate_by_name = True
