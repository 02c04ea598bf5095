"""Base model configuration for rule engine payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Frozen model that keeps every field the rule engine sends.

    Declared fields are addressed in snake_case and read/written under their
    camelCase wire names. Undeclared fields are carried through untouched so
    that a dump reproduces the engine payload.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )
