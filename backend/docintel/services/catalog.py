"""
Stage Catalog Module

Loads the stage requirement catalog (which documents each growth stage needs,
and under which data-room folder they are filed) from its JSON configuration
table and exposes it as a read-only object.

Key Features:
- Load-time validation: a malformed catalog fails at startup, never at call time
- Universal and per-stage document lists
- Fixed, ordered data-room category set
"""

import json
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from ..schemas import DocumentCatalogEntry, StageRequirements, StartupStage
from ..utils.config import settings
from ..utils.logger import catalog_logger as logger
from .stage_normalizer import normalize_stage

DEFAULT_LEGAL_CATEGORY = "07_Legal"


class CatalogConfigError(Exception):
    """Raised when the stage catalog is missing, unreadable or inconsistent."""


class StageCatalog:
    """
    Immutable stage requirement catalog.

    Built once and injected into the scoring services. All list accessors
    return tuples so callers cannot mutate the catalog.
    """

    def __init__(self,
                 universal: Iterable[DocumentCatalogEntry],
                 stages: Mapping[StartupStage, Tuple[Iterable[DocumentCatalogEntry], Iterable[DocumentCatalogEntry]]],
                 data_room_categories: Iterable[str],
                 legal_category: str = DEFAULT_LEGAL_CATEGORY):
        self._categories = tuple(data_room_categories)
        self._legal_category = legal_category
        self._universal = tuple(universal)
        self._stages = MappingProxyType({
            stage: (tuple(mandatory), tuple(optional))
            for stage, (mandatory, optional) in stages.items()
        })
        self._validate()
        logger.debug(
            f"Stage catalog ready: {len(self._universal)} universal documents, "
            f"{len(self._stages)} stages, {len(self._categories)} data-room categories"
        )

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "StageCatalog":
        """
        Build a catalog from its JSON representation.

        Raises:
            CatalogConfigError: If the structure or any entry is invalid
        """
        if not isinstance(raw, dict):
            raise CatalogConfigError("Catalog root must be a JSON object")

        try:
            categories = raw["data_room_categories"]
            raw_stages = raw["stages"]
            universal = [DocumentCatalogEntry(**entry) for entry in raw.get("universal", [])]
        except KeyError as e:
            raise CatalogConfigError(f"Catalog is missing required key: {e}") from e
        except (TypeError, ValidationError) as e:
            raise CatalogConfigError(f"Invalid universal catalog entry: {e}") from e

        if not isinstance(categories, list) or not all(isinstance(c, str) for c in categories):
            raise CatalogConfigError("'data_room_categories' must be a list of folder names")
        if not isinstance(raw_stages, dict):
            raise CatalogConfigError("'stages' must map stage names to document lists")

        stages = {}
        for stage_key, lists in raw_stages.items():
            try:
                stage = StartupStage(stage_key)
            except ValueError as e:
                raise CatalogConfigError(f"Unknown stage key in catalog: {stage_key!r}") from e
            try:
                mandatory = [
                    DocumentCatalogEntry(**{"is_mandatory": True, **entry})
                    for entry in lists.get("mandatory", [])
                ]
                optional = [
                    DocumentCatalogEntry(**{"is_mandatory": False, **entry})
                    for entry in lists.get("optional", [])
                ]
            except (AttributeError, TypeError, ValidationError) as e:
                raise CatalogConfigError(f"Invalid catalog entry for stage {stage_key}: {e}") from e
            stages[stage] = (mandatory, optional)

        return cls(
            universal=universal,
            stages=stages,
            data_room_categories=categories,
            legal_category=raw.get("legal_category", DEFAULT_LEGAL_CATEGORY),
        )

    def _validate(self) -> None:
        if not self._categories:
            raise CatalogConfigError("Catalog defines no data-room categories")
        if len(set(self._categories)) != len(self._categories):
            raise CatalogConfigError("Data-room categories must be unique")
        if self._legal_category not in self._categories:
            raise CatalogConfigError(f"Legal category {self._legal_category!r} is not a data-room category")

        missing = [stage.value for stage in StartupStage if stage not in self._stages]
        if missing:
            raise CatalogConfigError(f"Catalog has no requirements for stage(s): {', '.join(missing)}")

        self._check_list("universal", self._universal)
        for stage, (mandatory, optional) in self._stages.items():
            self._check_list(f"{stage.value}.mandatory", mandatory, expect_mandatory=True)
            self._check_list(f"{stage.value}.optional", optional, expect_mandatory=False)

    def _check_list(self, name: str, entries: Tuple[DocumentCatalogEntry, ...],
                    expect_mandatory: Optional[bool] = None) -> None:
        seen = set()
        for entry in entries:
            if entry.id in seen:
                raise CatalogConfigError(f"Duplicate document id {entry.id!r} in {name}")
            seen.add(entry.id)
            if entry.category not in self._categories:
                raise CatalogConfigError(
                    f"Document {entry.id!r} in {name} uses unknown category {entry.category!r}"
                )
            if expect_mandatory is not None and entry.is_mandatory != expect_mandatory:
                raise CatalogConfigError(
                    f"Document {entry.id!r} in {name} has is_mandatory={entry.is_mandatory}"
                )

    @property
    def stages(self) -> List[StartupStage]:
        return [stage for stage in StartupStage if stage in self._stages]

    @property
    def data_room_categories(self) -> Tuple[str, ...]:
        return self._categories

    @property
    def legal_category(self) -> str:
        return self._legal_category

    @property
    def universal(self) -> Tuple[DocumentCatalogEntry, ...]:
        return self._universal

    @property
    def universal_mandatory(self) -> Tuple[DocumentCatalogEntry, ...]:
        return tuple(entry for entry in self._universal if entry.is_mandatory)

    @property
    def legal_entries(self) -> Tuple[DocumentCatalogEntry, ...]:
        """Universal documents filed under the Legal bucket."""
        return tuple(entry for entry in self._universal if entry.category == self._legal_category)

    def mandatory_for(self, stage) -> Tuple[DocumentCatalogEntry, ...]:
        return self._stages[normalize_stage(stage)][0]

    def optional_for(self, stage) -> Tuple[DocumentCatalogEntry, ...]:
        return self._stages[normalize_stage(stage)][1]

    def requirements_for(self, stage) -> StageRequirements:
        canonical = normalize_stage(stage)
        mandatory, optional = self._stages[canonical]
        return StageRequirements(
            stage=canonical,
            universal=list(self._universal),
            mandatory=list(mandatory),
            optional=list(optional),
        )


def load_catalog(path: str) -> StageCatalog:
    """
    Load and validate the stage catalog from a JSON file.

    Args:
        path: Path to the catalog JSON file

    Returns:
        Validated StageCatalog

    Raises:
        CatalogConfigError: If the file cannot be read or the catalog is malformed
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading stage catalog {path}: {str(e)}")
        raise CatalogConfigError(f"Cannot load stage catalog from {path}: {e}") from e

    catalog = StageCatalog.from_dict(raw)
    logger.info(f"Loaded stage catalog from {path}")
    return catalog


_default_catalog: Optional[StageCatalog] = None


def get_catalog() -> StageCatalog:
    """Return the process-wide catalog, loading it from settings.CATALOG_PATH on first use."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = load_catalog(settings.CATALOG_PATH)
    return _default_catalog
