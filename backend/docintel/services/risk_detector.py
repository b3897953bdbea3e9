"""
Risk Detector Module

Classifies a startup's overall document risk (Low / Medium / High) from the
mandatory documents it has not uploaded plus the risk flags surfaced by the
AI document analyses.
"""

from typing import Iterable, List, Optional

from ..schemas import RiskAssessment, RiskLevel
from ..utils.logger import risk_logger as logger
from .catalog import StageCatalog, get_catalog
from .stage_normalizer import normalize_stage

MEDIUM_RISK_FLAG_THRESHOLD = 2


class RiskDetector:
    """
    Service for detecting document risks.

    Uploaded documents are matched to catalog entries by id.
    """

    def __init__(self, catalog: Optional[StageCatalog] = None):
        self.catalog = catalog or get_catalog()

    def detect_risks(self, uploaded_doc_ids: Iterable[str], stage,
                     ai_findings: Iterable[str]) -> RiskAssessment:
        """
        Detect risk flags and the overall risk level.

        Args:
            uploaded_doc_ids: Catalog ids of the uploaded documents
            stage: Startup stage label, possibly legacy
            ai_findings: Risk signals reported by the document analyses

        Returns:
            RiskAssessment with the level and every flag, AI findings first
        """
        canonical = normalize_stage(stage)
        uploaded = set(uploaded_doc_ids)
        flags: List[str] = list(ai_findings)

        universal_missing = [e for e in self.catalog.universal_mandatory if e.id not in uploaded]
        stage_missing = [e for e in self.catalog.mandatory_for(canonical) if e.id not in uploaded]

        if universal_missing:
            flags.append(
                f"Missing Universal Mandatory: {', '.join(e.label for e in universal_missing)}"
            )
        if stage_missing:
            flags.append(
                f"Missing {canonical.value} Stage Mandatory: {', '.join(e.label for e in stage_missing)}"
            )

        if universal_missing or stage_missing:
            level = RiskLevel.HIGH
        elif len(flags) > MEDIUM_RISK_FLAG_THRESHOLD:
            level = RiskLevel.MEDIUM
        else:
            level = RiskLevel.LOW

        logger.info(
            f"Risk for stage {canonical.value}: level={level.value}, "
            f"universal_missing={len(universal_missing)}, stage_missing={len(stage_missing)}, "
            f"flags={len(flags)}"
        )
        return RiskAssessment(level=level, flags=flags)
