"""Base model configuration for all data structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model with standard configuration.

    Models are frozen and accept keys by either field name or alias, since
    pubspec keys are camelCase while the Python side is snake_case.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
