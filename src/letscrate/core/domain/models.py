"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of the loosely-typed JSON the service returns, without
  coupling the Core to HTTP.
- Extra keys sent by the server are ignored; only what the client displays
  or resolves against is modelled.

Note:
- These models describe *what* the catalog is, not *how* it is fetched.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, field_validator
from pydantic.config import ConfigDict


class ResourceKind(str, Enum):
    """Which part of the catalog a name refers to."""

    CRATE = "crate"
    FILE = "file"

    @property
    def plural(self) -> str:
        return f"{self.value}s"


class ResolutionPolicy(str, Enum):
    """Cardinality policy applied when resolving names to identifiers."""

    EXACT = "exact"
    WILDCARD = "wildcard"

    @classmethod
    def from_bool(cls, regex: bool) -> "ResolutionPolicy":
        """Derive the policy from the `--regexp` flag."""

        return cls.WILDCARD if regex else cls.EXACT


def _coerce_id(value: Any) -> Any:
    # The service sends ids as JSON numbers in some payloads.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


WireId = Annotated[str, BeforeValidator(_coerce_id)]


class File(BaseModel):
    """A file stored inside a crate."""

    model_config = ConfigDict(extra="ignore")

    id: WireId = Field(..., min_length=1, description="Identifier (5 digits on the wire).")
    name: str = Field(..., description="File name as uploaded.")
    short_code: str = Field(default="", description="Short link code (lts.cr/<code>).")


class Crate(BaseModel):
    """A crate (folder) and the files it owns."""

    model_config = ConfigDict(extra="ignore")

    id: WireId = Field(..., min_length=1, description="Identifier (5 digits on the wire).")
    name: str = Field(..., description="Crate name.")
    short_code: str = Field(default="", description="Short link code (lts.cr/<code>).")
    files: list[File] = Field(
        default_factory=list,
        description="Files in the crate; empty means the crate is empty.",
    )

    @field_validator("files", mode="before")
    @classmethod
    def _none_means_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Catalog(BaseModel):
    """Snapshot of every crate (and its files) owned by the account."""

    model_config = ConfigDict(extra="ignore")

    crates: list[Crate] = Field(default_factory=list)

    def all_files(self) -> list[File]:
        """Flatten crate membership: every file of every crate, in order."""

        return [file for crate in self.crates for file in crate.files]

    def name_for(self, identifier: str, kind: ResourceKind) -> str | None:
        """Return the display name of a crate or file, if it is in the snapshot."""

        entries = self.crates if kind is ResourceKind.CRATE else self.all_files()
        for entry in entries:
            if entry.id == identifier:
                return entry.name
        return None


class Credentials(BaseModel):
    """Account credentials sent as HTTP basic auth."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @classmethod
    def parse(cls, login: str) -> "Credentials | None":
        """Split `username:password`; None when the value has another shape."""

        parts = login.split(":")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            return None
        return cls(username=parts[0], password=parts[1])
