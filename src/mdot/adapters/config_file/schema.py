"""Pydantic models describing entry tables in configuration files."""

from __future__ import annotations

from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
    model_validator,
)


def _string_to_list(value: object) -> object:
    if isinstance(value, str):
        return [value]
    return value


class ConfigBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class LinkTable(ConfigBaseModel):
    source: StrictStr
    targets: list[StrictStr]
    overwrite: StrictBool = False
    backup: StrictBool = False

    _normalize_targets = field_validator("targets", mode="before")(_string_to_list)


class EntryTable(ConfigBaseModel):
    """One entry declared as a table.

    Unknown keys are kept in ``model_extra`` so the translator can report them.
    """

    model_config = ConfigDict(extra="allow")

    name: StrictStr | None = None
    depends: list[StrictStr] = Field(default_factory=list)
    links: list[LinkTable] | dict[StrictStr, StrictStr | list[StrictStr]] = Field(default_factory=dict)
    exclude: list[StrictStr] | None = None
    excludes: list[StrictStr] | None = None
    templates: list[StrictStr] = Field(default_factory=list)
    package_name: Any = None
    pkg: Any = None
    enabled: StrictBool = True

    _normalize_lists = field_validator("exclude", "excludes", "templates", mode="before")(
        _string_to_list
    )

    @model_validator(mode="after")
    def _reject_conflicting_aliases(self) -> Self:
        if self.exclude is not None and self.excludes is not None:
            raise ValueError("use either 'exclude' or 'excludes', not both")
        if self.package_name is not None and self.pkg is not None:
            raise ValueError("use either 'package_name' or 'pkg', not both")
        return self

    @property
    def exclude_patterns(self) -> list[str]:
        return self.exclude or self.excludes or []

    @property
    def package(self) -> Any:
        return self.package_name if self.package_name is not None else self.pkg

    @property
    def ignored_keys(self) -> list[str]:
        return sorted(self.model_extra or {})
