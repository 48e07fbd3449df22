"""Parse-or-reject functions, one per entity insert shape.

Each parser accepts any decoded JSON value and returns the normalized insert
model, or raises ``ValidationError`` listing every offending field. Parsing is
pure: it never touches storage.

The write routes declare the same insert schemas as their request bodies, so
FastAPI applies identical rules there and reports failures in the same 400
shape. Only ``parse_message`` is called from a route directly: the append
endpoint must look the conversation up before validating the body.
"""

from collections.abc import Callable
from typing import Any, TypeAlias, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.app.core.exceptions import ValidationError
from src.app.models.conversation import ChatMessage
from src.app.schemas.collaborator import CollaboratorCreate
from src.app.schemas.conversation import AIConversationCreate
from src.app.schemas.file import FileCreate
from src.app.schemas.project import ProjectCreate
from src.app.schemas.user import UserCreate

SchemaT = TypeVar("SchemaT", bound=BaseModel)

Parser: TypeAlias = Callable[[Any], SchemaT]


def make_parser(
    schema: type[SchemaT], detail: str | None = None
) -> Parser[SchemaT]:
    """Build a parse-or-reject function for ``schema``."""

    def parse(data: Any) -> SchemaT:
        try:
            return schema.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e, detail) from e

    parse.__name__ = f"parse_{schema.__name__}"
    return parse


parse_user = make_parser(UserCreate)
parse_project = make_parser(ProjectCreate)
parse_file = make_parser(FileCreate)
parse_collaborator = make_parser(CollaboratorCreate)
parse_ai_conversation = make_parser(AIConversationCreate)
parse_message = make_parser(ChatMessage, detail="Invalid message format")
