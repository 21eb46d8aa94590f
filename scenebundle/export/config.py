"""Mini README: Per-export configuration and its change fingerprint.

Structure:
    * ExportConfig - everything one export depends on, immutable.

``fingerprint`` concatenates every field in a fixed order; two configs with
the same fingerprint produce the same preview, so the coordinator skips
recomputation when it has not changed.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional, Tuple

from ..classification import ExportMode
from ..filtering import ExclusionRules
from ..staging import DEFAULT_STAGING_ROOT


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Effective configuration of one export."""

    root_path: str = ""
    mode: ExportMode = ExportMode.VISUALS_AND_ANIMATIONS
    exclusions: ExclusionRules = field(default_factory=ExclusionRules)
    extra_includes: Tuple[str, ...] = ()
    reorganize: bool = False
    staging_root_name: str = DEFAULT_STAGING_ROOT
    delete_staging_after_export: bool = True

    def fingerprint(self) -> str:
        extras = "|".join(path for path in self.extra_includes if path)
        parts = [
            self.root_path,
            self.mode.value,
            *(str(flag) for flag in self.exclusions.as_flags()),
            extras,
            str(self.reorganize),
            self.staging_root_name,
            str(self.delete_staging_after_export),
        ]
        return "::".join(parts)

    def evolve(self, **changes: Any) -> "ExportConfig":
        """Return a copy with ``changes`` applied (extras coerced to a tuple)."""

        if "extra_includes" in changes:
            changes["extra_includes"] = tuple(changes["extra_includes"] or ())
        return replace(self, **changes)

    @classmethod
    def from_settings(
        cls,
        settings: Any,
        root_path: str,
        *,
        mode: Optional[ExportMode] = None,
        exclusions: Optional[ExclusionRules] = None,
        extra_includes: Iterable[str] = (),
        reorganize: bool = False,
    ) -> "ExportConfig":
        """Fill defaults from ``SceneBundleSettings``."""

        return cls(
            root_path=root_path,
            mode=mode or settings.default_mode,
            exclusions=exclusions or ExclusionRules(),
            extra_includes=tuple(extra_includes),
            reorganize=reorganize,
            staging_root_name=settings.staging_root_name,
            delete_staging_after_export=settings.delete_staging_after_export,
        )
