from pydantic import BaseModel, ConfigDict


class PropertyFields(BaseModel):
    """Body for both create and full-replace update."""
    name: str | None = None
    address: str | None = None
    total_units: int | None = None


class PropertyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str | None
    address: str | None
    total_units: int | None
