"""Pydantic schemas for API response serialization."""

from pydantic import BaseModel, ConfigDict, Field

from src.core.blocks import BlockRecord


class BlockSchema(BaseModel):
    """Schema for one carousel block."""

    title: str
    images: list[str] = Field(..., min_length=1, description="Candidate image URLs")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Bilbao",
                "images": ["/img/1.jpg", "/img/2.jpg", "/img/3.jpg", "/img/4.jpg"],
            }
        }
    )

    @classmethod
    def from_record(cls, record: BlockRecord) -> "BlockSchema":
        return cls(title=record.title, images=list(record.images))


class HealthResponse(BaseModel):
    """Schema for the health endpoint."""

    status: str = Field(..., description="'healthy' or 'unhealthy'")
    version: str
    blocks: int = Field(..., description="Number of blocks in the catalog")
