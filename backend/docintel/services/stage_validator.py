"""
Stage Requirement Validator Module

Lightweight pre-AI gate: checks only whether the mandatory documents for a
stage have been uploaded, without looking at any document content.
"""

from typing import Iterable, Optional

from ..schemas import RiskLevel, ValidationResult
from ..utils.logger import risk_logger as logger
from .catalog import StageCatalog, get_catalog
from .stage_normalizer import normalize_stage


class StageRequirementValidator:
    """Presence check of Universal and stage mandatory documents by id."""

    def __init__(self, catalog: Optional[StageCatalog] = None):
        self.catalog = catalog or get_catalog()

    def validate_stage_requirements(self, uploaded_doc_ids: Iterable[str], stage) -> ValidationResult:
        canonical = normalize_stage(stage)
        uploaded = set(uploaded_doc_ids)

        missing_universal = [
            e.label for e in self.catalog.universal_mandatory if e.id not in uploaded
        ]
        missing_mandatory = [
            e.label for e in self.catalog.mandatory_for(canonical) if e.id not in uploaded
        ]

        if missing_universal:
            risk_level = RiskLevel.HIGH
        elif missing_mandatory:
            risk_level = RiskLevel.MEDIUM
        else:
            risk_level = RiskLevel.LOW

        result = ValidationResult(
            is_passed=not missing_universal and not missing_mandatory,
            missing_mandatory=missing_mandatory,
            missing_universal=missing_universal,
            risk_level=risk_level,
        )
        logger.info(
            f"Stage validation for {canonical.value}: passed={result.is_passed}, "
            f"risk={risk_level.value}"
        )
        return result
