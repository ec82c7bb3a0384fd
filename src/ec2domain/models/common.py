from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Annotated, Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, RootModel, StringConstraints, model_validator

from ec2domain.errors import MissingFieldError

US_EAST_1 = "us-east-1"
US_WEST_1 = "us-west-1"
EU_WEST_1 = "eu-west-1"
AP_SOUTHEAST_1 = "ap-southeast-1"

KNOWN_REGIONS = (US_EAST_1, US_WEST_1, EU_WEST_1, AP_SOUTHEAST_1)


class Region(RootModel[Annotated[str, StringConstraints(min_length=1)]]):
    """Opaque region token; every resource snapshot is scoped to exactly one."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    def __repr__(self) -> str:
        return f"Region({self.root!r})"


class DomainModel(BaseModel):
    """Immutable snapshot of server-reported state.

    Unknown upstream keys are dropped so equality and hash stay structural over
    the declared fields only. Subclasses list their mandatory fields in
    ``required_errors``; a missing or ``None`` value raises the mapped error
    before any field validation runs.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    required_errors: ClassVar[dict[str, type[MissingFieldError]]] = {}

    @classmethod
    def input_keys(cls, name: str) -> tuple[str, ...]:
        alias = cls.model_fields[name].validation_alias
        if isinstance(alias, AliasChoices):
            return tuple(choice for choice in alias.choices if isinstance(choice, str))
        return (name,)

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        for name, error in cls.required_errors.items():
            if all(data.get(key) is None for key in cls.input_keys(name)):
                raise error(cls.__name__)
        return data


def render(label: str, pairs: Iterable[tuple[str, object]]) -> str:
    """Render a field-labelled, deterministic one-line description."""

    body = ", ".join(f"{name}={value}" for name, value in pairs)
    return f"{label} [{body}]"


def sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)
