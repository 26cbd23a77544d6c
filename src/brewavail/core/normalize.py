"""Map registry records onto PackageDescriptor."""

from __future__ import annotations

from typing import Any

from brewavail.core.errors import MalformedPackageError
from brewavail.core.models import Cask, Formula, PackageDescriptor, PackageKind


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _identifier(record: Formula | Cask) -> str:
    return _text(record.path) or "unknown"


def describe_formula(formula: Formula, include_deps: bool = False) -> PackageDescriptor:
    """Build a descriptor for a formula.

    Args:
        formula: The registry record.
        include_deps: Whether to carry dependency and dependent names.

    Returns:
        A PackageDescriptor of kind FORMULA.

    Raises:
        MalformedPackageError: If the formula has no name.
    """
    name = _text(formula.name)
    if not name:
        raise MalformedPackageError(
            kind=PackageKind.FORMULA.value, identifier=_identifier(formula)
        )

    dependencies = dependents = None
    if include_deps:
        dependencies = tuple(str(d) for d in formula.deps or ())
        dependents = tuple(str(d) for d in formula.required_by or ())

    return PackageDescriptor(
        kind=PackageKind.FORMULA,
        name=name,
        version=_text(formula.version),
        info=formula.desc or name,
        outdated=bool(formula.outdated),
        installed=bool(formula.installed),
        path=_text(formula.path),
        dependencies=dependencies,
        dependents=dependents,
    )


def describe_cask(cask: Cask, include_deps: bool = False) -> PackageDescriptor:
    """Build a descriptor for a cask.

    Casks expose no dependency relations, so requested edges are empty.

    Raises:
        MalformedPackageError: If the cask has no token.
    """
    name = _text(cask.token)
    if not name:
        raise MalformedPackageError(
            kind=PackageKind.CASK.value, identifier=_identifier(cask)
        )

    return PackageDescriptor(
        kind=PackageKind.CASK,
        name=name,
        version=_text(cask.version),
        info=cask.desc or name,
        outdated=bool(cask.outdated),
        installed=bool(cask.installed),
        path=_text(cask.path),
        dependencies=() if include_deps else None,
        dependents=() if include_deps else None,
    )
