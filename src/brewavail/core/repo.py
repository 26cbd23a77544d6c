"""Repository gathering package descriptors from the registries."""

from __future__ import annotations

import time
from typing import Callable, Iterable, List, TypeVar

from brewavail.core.config import Settings
from brewavail.core.errors import BrewError, RegistryAccessError
from brewavail.core.logging import get_logger
from brewavail.core.models import Cask, Formula, PackageDescriptor, PackageKind
from brewavail.core.normalize import describe_cask, describe_formula
from brewavail.core.selection import Selection
from brewavail.providers.base import PackageRegistry
from brewavail.providers.brew_cask import BrewCaskRegistry
from brewavail.providers.brew_formula import BrewFormulaRegistry

log = get_logger(__name__)

R = TypeVar("R", Formula, Cask)


def _enumerate(registry: PackageRegistry[R], kind: PackageKind) -> List[R]:
    """Fully enumerate a registry, translating foreign failures."""
    try:
        records = list(registry.all())
    except BrewError as e:
        raise e.with_context(kind=kind.value)
    except Exception as e:
        raise RegistryAccessError(kind=kind.value, error=str(e)) from e

    log.debug("registry_enumerated", kind=kind.value, count=len(records))

    return records


class Repository:
    """Gathers descriptors for a selection from explicit registries."""

    def __init__(
        self,
        formulae: PackageRegistry[Formula],
        casks: PackageRegistry[Cask],
    ) -> None:
        self.formulae = formulae
        self.casks = casks

    def gather(self, selection: Selection) -> List[PackageDescriptor]:
        """Gather every descriptor the selection asks for.

        Kinds are gathered in selection order, each in registry order. The
        first failure aborts the whole gather.

        Args:
            selection: The interpreted command-line flags.

        Returns:
            The complete list of descriptors.

        Raises:
            RegistryAccessError: If a registry cannot be enumerated.
            MalformedPackageError: If a record has no identifier.
        """
        start = time.perf_counter()
        kinds = ",".join(k.value for k in selection.kinds)
        log.info("gather_start", kinds=kinds, include_deps=selection.include_deps)

        items: List[PackageDescriptor] = []
        for kind in selection.kinds:
            items.extend(self._describe_all(kind, selection.include_deps))

        duration_ms = int((time.perf_counter() - start) * 1000)
        log.info(
            "gather_complete",
            kinds=kinds,
            count=len(items),
            duration_ms=duration_ms,
        )

        return items

    def _describe_all(self, kind: PackageKind, include_deps: bool) -> List[PackageDescriptor]:
        if kind is PackageKind.FORMULA:
            return _describe_each(
                _enumerate(self.formulae, kind), describe_formula, include_deps
            )
        return _describe_each(_enumerate(self.casks, kind), describe_cask, include_deps)


def _describe_each(
    records: Iterable[R],
    describe: Callable[[R, bool], PackageDescriptor],
    include_deps: bool,
) -> List[PackageDescriptor]:
    try:
        return [describe(r, include_deps) for r in records]
    except BrewError as e:
        log.error("describe_failed", error=e.message, context=e.context)
        raise


def default_repository(settings: Settings) -> Repository:
    """Build a Repository backed by the local Homebrew installation.

    Args:
        settings: Runtime settings.

    Returns:
        A Repository over BrewFormulaRegistry and BrewCaskRegistry.
    """
    return Repository(BrewFormulaRegistry(settings), BrewCaskRegistry(settings))
