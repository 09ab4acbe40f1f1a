"""Shared base for configuration models."""

from pydantic import BaseModel, ConfigDict


class ConfigModel(BaseModel):
    """Immutable configuration fragment.

    Fields default to their zero value so that an unset field can be told
    apart from a configured one when documents are merged.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
