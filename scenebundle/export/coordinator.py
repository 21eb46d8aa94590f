"""Mini README: Orchestration of preview computation and packaging.

Structure:
    * CoordinatorState - lifecycle states of one export session.
    * AssetRecord / PreviewResult / ExportReport - values handed to drivers.
    * validate_root - ConfigError unless the root is a usable scene file.
    * compute_preview - pure (config, previous selection) -> preview step.
    * ExportCoordinator - thin stateful driver around ``compute_preview`` that
      owns the selection and performs staging and packaging.

The coordinator never retries a collaborator. Every failure is recorded in
``last_error``, passes through ``FAILED`` and leaves the coordinator back in
``AWAITING_SELECTION`` (or ``IDLE`` when nothing is computed) before the
exception reaches the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

from .adapters import FileSystemAdapter, PackageWriter
from .config import ExportConfig
from ..classification import AssetClassifier, AssetKind, is_scene
from ..dependencies import DependencyGraphProvider, DependencyResolver
from ..errors import (
    CollaboratorIOError,
    ConfigError,
    EmptySelectionError,
    SceneBundleError,
    StagingEmptyError,
)
from ..filtering import AssetFilter
from ..logging_utils import get_logger
from ..selection import SelectionModel, reconcile
from ..staging import StagingPlanner, make_run_id, sanitize_folder_name

LOGGER = get_logger(__name__)

ASSET_ROOT = "Assets"

T = TypeVar("T")


class CoordinatorState(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    FILTERING = "filtering"
    AWAITING_SELECTION = "awaiting_selection"
    STAGING = "staging"
    PACKAGING = "packaging"
    CLEANUP = "cleanup"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class AssetRecord:
    path: str
    kind: AssetKind
    selected: bool = True


@dataclass(slots=True)
class PreviewResult:
    """Outcome of one recomputation."""

    records: List[AssetRecord] = field(default_factory=list)
    selection: Dict[str, bool] = field(default_factory=dict)
    note: str = ""
    raw_count: int = 0

    @property
    def paths(self) -> List[str]:
        return [record.path for record in self.records]


@dataclass(slots=True)
class ExportReport:
    """What an export wrote and where staging went."""

    output_file: Path
    packaged_paths: List[str]
    staging_plan: Optional[Dict[str, str]] = None
    staging_directory: Optional[str] = None
    staging_deleted: bool = False


def validate_root(
    root_path: str,
    is_folder: Optional[Callable[[str], bool]] = None,
    exists: Optional[Callable[[str], bool]] = None,
) -> None:
    """Raise ``ConfigError`` unless ``root_path`` names an existing scene file."""

    if not root_path:
        raise ConfigError("No scene selected.")
    if not is_scene(root_path) or (is_folder is not None and is_folder(root_path)):
        raise ConfigError("Selected asset is not a valid .unity scene.")
    if exists is not None and not exists(root_path):
        raise ConfigError("Selected asset is not a valid .unity scene.")


def compute_preview(
    config: ExportConfig,
    previous_selection: Mapping[str, bool],
    resolver: DependencyResolver,
    asset_filter: AssetFilter,
    classifier: AssetClassifier,
    on_stage: Optional[Callable[[CoordinatorState], None]] = None,
    exists: Optional[Callable[[str], bool]] = None,
) -> PreviewResult:
    """Resolve, filter and classify the closure described by ``config``.

    An unusable root yields an empty result whose note explains why. When
    ``exists`` is given, a root it does not report counts as unusable.
    Collaborator failures propagate.
    """

    try:
        validate_root(config.root_path, resolver.provider.is_folder, exists)
    except ConfigError as error:
        return PreviewResult(note=str(error))

    if on_stage is not None:
        on_stage(CoordinatorState.RESOLVING)
    raw = resolver.resolve(config.root_path, config.extra_includes)

    if on_stage is not None:
        on_stage(CoordinatorState.FILTERING)
    filtered = asset_filter.filter(raw, config.mode, config.exclusions)

    selection = reconcile(previous_selection, filtered)
    records = [
        AssetRecord(path=path, kind=classifier.classify(path), selected=selection[path])
        for path in filtered
    ]
    return PreviewResult(
        records=records,
        selection=selection,
        note=f"All deps: {len(raw)} | After filters: {len(filtered)}",
        raw_count=len(raw),
    )


class ExportCoordinator:
    """Drive recomputation, selection and export for one root scene."""

    def __init__(
        self,
        provider: DependencyGraphProvider,
        filesystem: FileSystemAdapter,
        package_writer: PackageWriter,
        *,
        config: Optional[ExportConfig] = None,
        classifier: Optional[AssetClassifier] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.provider = provider
        self.filesystem = filesystem
        self.package_writer = package_writer
        self.classifier = classifier or AssetClassifier(provider.get_asset_type)
        self.resolver = DependencyResolver(provider)
        self.asset_filter = AssetFilter(provider.is_folder)
        self.selection = SelectionModel()
        self._clock = clock
        self._config = config or ExportConfig()
        self._preview = PreviewResult(note="No scene selected.")
        self._last_fingerprint: Optional[str] = None
        self._last_root: Optional[str] = None
        self._recomputing = False
        self._dirty = False
        self.state = CoordinatorState.IDLE
        self.state_history: List[CoordinatorState] = [CoordinatorState.IDLE]
        self.last_error: Optional[SceneBundleError] = None

    # -----------------------------------------------------------------
    # State
    # -----------------------------------------------------------------
    def _transition(self, state: CoordinatorState) -> None:
        LOGGER.debug("State %s -> %s", self.state.value, state.value)
        self.state = state
        self.state_history.append(state)

    def _settle(self) -> None:
        if self._preview.records:
            self._transition(CoordinatorState.AWAITING_SELECTION)
        else:
            self._transition(CoordinatorState.IDLE)

    def _fail(self, error: SceneBundleError) -> None:
        self.last_error = error
        self._transition(CoordinatorState.FAILED)
        LOGGER.error("Export step failed: %s", error)
        self._settle()

    @property
    def config(self) -> ExportConfig:
        return self._config

    @property
    def note(self) -> str:
        return self._preview.note

    @property
    def records(self) -> List[AssetRecord]:
        return [
            replace(record, selected=self.selection.is_selected(record.path))
            for record in self._preview.records
        ]

    @property
    def computed_paths(self) -> List[str]:
        return self._preview.paths

    def kinds(self) -> Dict[str, AssetKind]:
        return {record.path: record.kind for record in self._preview.records}

    def summary(self) -> Dict[str, Any]:
        return {
            "root_path": self._config.root_path,
            "mode": self._config.mode.value,
            "raw_count": self._preview.raw_count,
            "total": len(self._preview.records),
            "selected": self.selection.selected_count(),
            "note": self._preview.note,
            "state": self.state.value,
        }

    # -----------------------------------------------------------------
    # Recompute
    # -----------------------------------------------------------------
    def update_config(self, config: Optional[ExportConfig] = None, **changes: Any) -> bool:
        """Replace or amend the configuration and recompute if it changed."""

        self._config = config if config is not None else self._config.evolve(**changes)
        return self.recompute()

    def recompute(self, force: bool = False) -> bool:
        """Recompute the preview when the fingerprint changed (or ``force``).

        Returns ``True`` when a recomputation ran. A call arriving while one
        is in flight only marks the preview dirty; the running call loops.
        """

        if self._recomputing:
            self._dirty = True
            return False
        if not force and self._config.fingerprint() == self._last_fingerprint:
            return False

        self._recomputing = True
        try:
            while True:
                self._dirty = False
                config = self._config
                self._recompute_once(config)
                self._last_fingerprint = config.fingerprint()
                if not self._dirty:
                    break
        finally:
            self._recomputing = False
        return True

    def _recompute_once(self, config: ExportConfig) -> None:
        if config.root_path != self._last_root:
            self.selection.reset()
            self._last_root = config.root_path

        try:
            preview = compute_preview(
                config,
                self.selection.snapshot(),
                self.resolver,
                self.asset_filter,
                self.classifier,
                on_stage=self._transition,
                exists=self.filesystem.file_exists,
            )
        except SceneBundleError as error:
            self._preview = PreviewResult(note=str(error))
            self.selection = SelectionModel()
            self._fail(error)
            raise

        self._preview = preview
        self.selection = SelectionModel(preview.selection)
        if preview.records:
            LOGGER.info("Preview for %s: %s", config.root_path, preview.note)
        else:
            LOGGER.warning("Preview is empty: %s", preview.note)
        self._settle()

    # -----------------------------------------------------------------
    # Selection
    # -----------------------------------------------------------------
    def set_selected(self, path: str, value: bool) -> None:
        self.selection.set_selected(path, value)

    def select_all(self) -> None:
        self.selection.set_all(True)

    def select_none(self) -> None:
        self.selection.set_all(False)

    def select_recommended(self) -> None:
        self.selection.select_recommended(self.kinds(), self._config.mode)

    def staging_preview(self) -> Dict[str, str]:
        """``{path: "<Category>/<filename>"}`` for every computed path."""

        planner = StagingPlanner(self.classifier)
        return {path: planner.staged_label(path) for path in self._preview.paths}

    # -----------------------------------------------------------------
    # Export
    # -----------------------------------------------------------------
    def default_package_name(self, now: Optional[datetime] = None) -> str:
        now = now or self._clock()
        stem = PurePosixPath(self._config.root_path).stem or "export"
        return f"{stem}_{now:%Y-%m-%d_%H-%M}{self.package_writer.default_suffix}"

    def _io(self, operation: str, path: str, func: Callable[..., T], *args: Any) -> T:
        try:
            return func(*args)
        except OSError as error:
            raise CollaboratorIOError(operation, path, str(error)) from error

    def _ensure_folder(self, parent: str, name: str) -> None:
        path = f"{parent}/{name}"
        if not self._io("check folder", path, self.provider.is_folder, path):
            self._io("create folder", path, self.filesystem.create_folder, parent, name)

    def _ensure_parent_folders(self, destination: str) -> None:
        parts = PurePosixPath(destination).parent.parts
        current = parts[0]
        for part in parts[1:]:
            self._ensure_folder(current, part)
            current = f"{current}/{part}"

    def _delete_staging(self, stage_base: str) -> None:
        self._io("delete staging", stage_base, self.filesystem.delete_directory, stage_base)
        LOGGER.info("Deleted staging run %s", stage_base)

    def _write_package(self, paths: List[str], output_file: Path) -> Path:
        self._transition(CoordinatorState.PACKAGING)
        return self._io(
            "write package", str(output_file), self.package_writer.write_package, paths, output_file
        )

    def export(self, output_file: Optional[Path] = None) -> ExportReport:
        """Package the current selection, staging it first when configured."""

        self.recompute()
        try:
            if self.state is not CoordinatorState.AWAITING_SELECTION:
                raise ConfigError(self._preview.note or "Nothing to export.")
            validate_root(
                self._config.root_path, self.provider.is_folder, self.filesystem.file_exists
            )
            selected = self.selection.selected_paths()
            if not selected:
                raise EmptySelectionError("Nothing selected.")
        except SceneBundleError as error:
            self._fail(error)
            raise

        now = self._clock()
        output_file = Path(output_file) if output_file else Path(self.default_package_name(now))
        try:
            if self._config.reorganize:
                report = self._export_staged(selected, output_file, now)
            else:
                self._write_package(selected, output_file)
                report = ExportReport(output_file=output_file, packaged_paths=selected)
                LOGGER.info("Exported %s assets to %s", len(selected), output_file)
        except SceneBundleError as error:
            self._fail(error)
            raise

        self.last_error = None
        self._transition(CoordinatorState.DONE)
        self._settle()
        return report

    def _export_staged(self, selected: List[str], output_file: Path, now: datetime) -> ExportReport:
        config = self._config
        safe_root = sanitize_folder_name(config.staging_root_name)
        run_id = make_run_id(config.root_path, now)
        staging_root = f"{ASSET_ROOT}/{safe_root}"
        stage_base = f"{staging_root}/{run_id}"

        self._transition(CoordinatorState.STAGING)
        planner = StagingPlanner(
            self.classifier,
            lambda path: self._io("check file", path, self.filesystem.file_exists, path),
        )
        plan = planner.plan(selected, staging_root, run_id)

        self._ensure_folder(ASSET_ROOT, safe_root)
        self._ensure_folder(staging_root, run_id)
        with self.filesystem.batch():
            for source, destination in plan.items():
                self._ensure_parent_folders(destination)
                self._io("copy file", source, self.filesystem.copy_file, source, destination)

        listed = self._io(
            "list staged files", stage_base, self.provider.list_files_under, stage_base
        )
        staged = self.asset_filter.valid_only(listed)
        if not staged:
            if config.delete_staging_after_export:
                self._delete_staging(stage_base)
            raise StagingEmptyError(f"Staging folder {stage_base} ended up empty. Export aborted.")

        self._write_package(staged, output_file)
        LOGGER.info("Exported organised package (%s staged assets) to %s", len(staged), output_file)
        report = ExportReport(
            output_file=output_file,
            packaged_paths=staged,
            staging_plan=plan,
            staging_directory=stage_base,
        )
        if config.delete_staging_after_export:
            self._transition(CoordinatorState.CLEANUP)
            self._delete_staging(stage_base)
            report.staging_deleted = True
        else:
            LOGGER.warning("Staging kept at %s", stage_base)
        return report
