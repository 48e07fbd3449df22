from pydantic import Field, StrictInt

from src.app.models.base import CamelModel


class CollaboratorCreate(CamelModel):
    project_id: StrictInt
    user_id: StrictInt
    role: str = Field(examples=["editor", "viewer"])
