from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(BaseModel):
    id: int
