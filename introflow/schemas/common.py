"""Shared schema base — camelCase JSON, ORM-readable, snake_case tolerant."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for every request/response body."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def reject_explicit_nulls(model: BaseModel, names: tuple[str, ...]) -> None:
    """Partial updates may omit a field but not null out a required column."""
    for name in names:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{name} cannot be null")
