"""Platform service catalog.

Bound service instances are read from the Cloud Foundry VCAP_SERVICES
document, which groups instances by label:

    {"postgres": [{"name": "db1", "label": "postgres", "plan": "small",
                   "tags": ["sql"], "credentials": {...}}]}
"""

import json

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from backman.config.errors import MalformedDocumentError
from backman.env import must_get_env

CATALOG_ENV_VAR = "VCAP_SERVICES"


class CatalogEntry(BaseModel):
    """A bound service instance as reported by the platform."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Unique instance name")
    label: str = Field(default="", description="Service type identifier")
    plan: str = Field(default="", description="Service plan name")
    tags: tuple[str, ...] = Field(default=(), description="Instance tags")


def parse_catalog(document: str | bytes) -> list[CatalogEntry]:
    """Parse a VCAP_SERVICES document into catalog entries.

    Entries keep the order in which they appear in the document. An entry
    without its own label inherits the label it is grouped under.

    Raises:
        MalformedDocumentError: If the document is not valid JSON or does
            not have the expected shape
    """
    try:
        data = json.loads(document)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(
            f"could not parse {CATALOG_ENV_VAR}: {e}", source=CATALOG_ENV_VAR
        ) from e

    if not isinstance(data, dict):
        raise MalformedDocumentError(
            f"could not parse {CATALOG_ENV_VAR}: root must be an object",
            source=CATALOG_ENV_VAR,
        )

    entries: list[CatalogEntry] = []
    for label, instances in data.items():
        if not isinstance(instances, list):
            raise MalformedDocumentError(
                f"could not parse {CATALOG_ENV_VAR}: '{label}' must be a list",
                source=CATALOG_ENV_VAR,
            )
        for instance in instances:
            if not isinstance(instance, dict):
                raise MalformedDocumentError(
                    f"could not parse {CATALOG_ENV_VAR}: instances of '{label}' must be objects",
                    source=CATALOG_ENV_VAR,
                )
            try:
                entries.append(CatalogEntry.model_validate({"label": label, **instance}))
            except ValidationError as e:
                raise MalformedDocumentError(
                    f"could not parse {CATALOG_ENV_VAR}: {e}", source=CATALOG_ENV_VAR
                ) from e
    return entries


def load_catalog() -> list[CatalogEntry]:
    """Load the catalog from the VCAP_SERVICES environment variable.

    Raises:
        MissingRequiredEnvError: If VCAP_SERVICES is not set
        MalformedDocumentError: If its content is invalid
    """
    return parse_catalog(must_get_env(CATALOG_ENV_VAR))
