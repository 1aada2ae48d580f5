"""Row -> pydantic conversion shared by the SQL stores."""

from typing import TypeVar

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def to_model(model: type[M], row) -> M:
    """Validate an ORM row into a pydantic model. Call inside the session (relationships load lazily)."""
    return model.model_validate(row, from_attributes=True)
