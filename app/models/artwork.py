from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from datetime import datetime
from enum import Enum

MIN_YEAR = 2000
MAX_TITLE_LENGTH = 255
MAX_DETAILS_LENGTH = 500


class ArtworkCategory(str, Enum):
    # La valeur est aussi celle utilisée dans le paramètre d'URL ?medium=
    PAINTING = "Painting"
    WORK_ON_PAPER = "Work on Paper"
    SCULPTURE = "Sculpture"

    @property
    def label(self) -> str:
        """Libellé affiché (fil d'Ariane, menu)"""
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    ArtworkCategory.PAINTING: "Paintings",
    ArtworkCategory.WORK_ON_PAPER: "Works on Paper",
    ArtworkCategory.SCULPTURE: "Sculpture",
}


class ArtworkBase(BaseModel):
    title: str
    year: int
    category: ArtworkCategory
    details: Optional[str] = None
    height: Optional[float] = None  # en pouces
    width: Optional[float] = None
    length: Optional[float] = None  # sculptures uniquement
    image_url: str


class Artwork(ArtworkBase):
    """Données d'une œuvre envoyées par l'admin (création / modification)"""

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        if len(value) > MAX_TITLE_LENGTH:
            raise ValueError("Title too long")
        return value

    @field_validator("year")
    @classmethod
    def check_year(cls, value: int) -> int:
        current_year = datetime.now().year
        if value < MIN_YEAR:
            raise ValueError(f"Year must be {MIN_YEAR} or later")
        if value > current_year:
            raise ValueError(f"Year cannot be later than {current_year}")
        return value

    @field_validator("details")
    @classmethod
    def check_details(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) > MAX_DETAILS_LENGTH:
            raise ValueError("Details too long")
        return value

    @field_validator("height", "width", "length")
    @classmethod
    def check_positive(cls, value: Optional[float], info) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError(f"{info.field_name.capitalize()} must be positive")
        return value

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Image is required")
        return value.strip()

    @model_validator(mode="after")
    def check_dimensions(self):
        has_height = self.height is not None
        has_width = self.width is not None
        has_length = self.length is not None
        issues = []

        if self.category == ArtworkCategory.SCULPTURE:
            # Sculpture : les trois dimensions ou aucune
            count = sum([has_height, has_width, has_length])
            if 0 < count < 3:
                if not has_height:
                    issues.append("Height is required when dimensions are provided")
                if not has_width:
                    issues.append("Width is required when dimensions are provided")
                if not has_length:
                    issues.append("Length is required when dimensions are provided")
        else:
            if has_height and not has_width:
                issues.append("Width is required when height is provided")
            if has_width and not has_height:
                issues.append("Height is required when width is provided")
            if has_length:
                issues.append("Length is only applicable to sculptures")

        if issues:
            raise ValueError("; ".join(issues))
        return self


class ArtworkInDB(ArtworkBase):
    id: str = Field(..., alias="_id")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        populate_by_name = True
