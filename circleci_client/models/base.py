"""
Shared base for CircleCI response models.

Responses are read models: unknown keys are dropped, decoded values are
immutable, and every field defaults to None so an omitted key stays absent.
"""

from pydantic import BaseModel, ConfigDict


class CircleCIModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
