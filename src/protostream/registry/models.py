"""Screen Data Models."""

from pydantic import BaseModel, Field


class ScreenEntity(BaseModel):
    """A named, positioned screen built from parser output."""

    name: str = Field(..., description="Display name as emitted by the model")
    id: str = Field(..., description="Container id derived from the name")
    markup: str = Field(default="", description="Raw screen markup")
    grid_column: int = Field(default=0)
    grid_row: int = Field(default=0)
    is_root: bool = Field(default=False, description="Explicitly marked entry screen")
    order: int = Field(default=0, ge=0, description="Insertion index, stable across edits")

    @property
    def cell(self) -> tuple[int, int]:
        return self.grid_column, self.grid_row


class RegistrySnapshot(BaseModel):
    """Serializable registry state."""

    screens: list[ScreenEntity] = Field(default_factory=list)
    entry_id: str | None = None
