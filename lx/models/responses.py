"""Serializable views of directory items."""

from pydantic import BaseModel, Field

from lx.models.directory import DirectoryItem


class DirectoryItemResponse(BaseModel):
    """Directory item as emitted by ``lx --json``."""
    name: str
    is_dir: bool
    is_hidden: bool
    permissions: str = Field(..., description="rwxr-xr-x format")
    size: int = Field(..., ge=0, description="Size in bytes")
    human_size: str
    created_at: str = Field(..., description="ISO creation date")

    @classmethod
    def from_item(cls, item: DirectoryItem, human_size: str) -> "DirectoryItemResponse":
        return cls(
            name=item.name,
            is_dir=item.is_dir,
            is_hidden=item.is_hidden,
            permissions=item.file_permissions,
            size=item.size,
            human_size=human_size,
            created_at=item.created_at.isoformat(),
        )
