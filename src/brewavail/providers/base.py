"""Protocol definitions for package registries."""

from __future__ import annotations

from typing import Iterable, Protocol, TypeVar

from brewavail.core.models import Cask, Formula

R = TypeVar("R", bound=Formula | Cask, covariant=True)


class PackageRegistry(Protocol[R]):
    """Protocol for package registries."""

    def all(self) -> Iterable[R]:
        """Enumerate every record the registry knows about."""
        ...
