from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from enum import Enum


class SiteAssetKind(str, Enum):
    HEADSHOT = "headshot"
    CV = "cv"


class SiteAssetUpdate(BaseModel):
    """Référence vers un fichier déjà envoyé sur le stockage externe"""
    url: str
    filename: Optional[str] = None

    @field_validator("url")
    @classmethod
    def check_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("URL is required")
        return value.strip()


class CVUpdate(SiteAssetUpdate):

    @field_validator("filename")
    @classmethod
    def check_pdf(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.lower().endswith(".pdf"):
            raise ValueError("Only PDF files are allowed")
        return value


class SiteAssetInDB(BaseModel):
    id: str = Field(..., alias="_id")
    kind: SiteAssetKind
    url: str
    filename: Optional[str] = None
    updated_at: Optional[datetime] = None

    class Config:
        populate_by_name = True


class AboutPage(BaseModel):
    artist_name: str
    bio: str
    bio_updated_at: Optional[datetime] = None
    headshot_url: Optional[str] = None
    cv_url: Optional[str] = None
    email: Optional[str] = None
    instagram: Optional[str] = None
    instagram_url: Optional[str] = None
    website: Optional[str] = None
