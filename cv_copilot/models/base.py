"""Base model classes for CV Copilot."""

from pydantic import BaseModel as PydanticBaseModel, ConfigDict


class BaseModel(PydanticBaseModel):
    """Base model with common functionality."""

    model_config = ConfigDict(use_enum_values=False, validate_assignment=True)


class ValueModel(BaseModel):
    """Immutable model; instances are built once and only ever read."""

    model_config = ConfigDict(frozen=True)
