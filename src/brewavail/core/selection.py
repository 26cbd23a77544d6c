"""What a single invocation asked for."""

from __future__ import annotations

from dataclasses import dataclass

from brewavail.core.models import PackageKind


@dataclass(frozen=True)
class Selection:
    """Data class to hold the interpreted command-line flags."""

    kinds: tuple[PackageKind, ...] = (PackageKind.FORMULA, PackageKind.CASK)
    as_json: bool = False
    include_deps: bool = False

    @classmethod
    def from_flags(
        cls,
        casks: bool = False,
        formulae: bool = False,
        as_json: bool = False,
        deps: bool = False,
    ) -> Selection:
        """Interpret the boolean flags.

        ``casks`` takes precedence when both kind flags are set. With neither
        set, formulae come before casks.

        Args:
            casks: Only list casks.
            formulae: Only list formulae.
            as_json: Emit JSON instead of text lines.
            deps: Include dependency and dependent names.

        Returns:
            The resulting Selection.
        """
        if casks:
            kinds: tuple[PackageKind, ...] = (PackageKind.CASK,)
        elif formulae:
            kinds = (PackageKind.FORMULA,)
        else:
            kinds = (PackageKind.FORMULA, PackageKind.CASK)

        return cls(kinds=kinds, as_json=as_json, include_deps=deps)
