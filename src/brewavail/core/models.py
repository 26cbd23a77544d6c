"""Data models for Homebrew packages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PackageKind(Enum):
    """Enumeration of package kinds."""

    FORMULA = "formula"
    CASK = "cask"


@dataclass
class Formula:
    """A formula as reported by the registry."""

    name: str | None
    version: Any = None
    desc: str | None = None
    outdated: bool = False
    installed: bool = False
    path: Any = None
    deps: list[str] = field(default_factory=list)
    required_by: list[str] = field(default_factory=list)


@dataclass
class Cask:
    """A cask as reported by the registry. Casks carry no dependency edges."""

    token: str | None
    version: Any = None
    desc: str | None = None
    outdated: bool = False
    installed: bool = False
    path: Any = None


@dataclass(frozen=True)
class PackageDescriptor:
    """Uniform, read-only description of a formula or cask.

    ``dependencies`` and ``dependents`` are None when dependency edges were
    not requested, which is distinct from an empty tuple.
    """

    kind: PackageKind
    name: str
    version: str
    info: str
    outdated: bool
    installed: bool
    path: str
    dependencies: tuple[str, ...] | None = None
    dependents: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if (self.dependencies is None) != (self.dependents is None):
            raise ValueError("dependencies and dependents must be set together")

    @property
    def has_deps(self) -> bool:
        return self.dependencies is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-ready dict, omitting absent fields.

        Returns:
            A dict with the keys used in JSON output.
        """
        data: dict[str, Any] = {
            "type": self.kind.value,
            "name": self.name,
            "version": self.version,
            "info": self.info,
            "outdated": self.outdated,
            "installed": self.installed,
            "path": self.path,
        }
        if self.has_deps:
            data["deps"] = list(self.dependencies)
            data["dependents"] = list(self.dependents)

        return data
