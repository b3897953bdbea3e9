"""
Aggregator Module

Combines the trust score, the risk assessment and the stage catalog into the
single investor-facing report returned to the UI and persistence layers.

Key Features:
- Missing mandatory/optional document lists
- Upload recommendations followed by AI suggestions
- Data room grouped by the fixed category set
- Investor-ready gate
"""

from typing import Dict, Iterable, List, Optional

from ..schemas import AggregatedOutput, AnalysisResult, RiskLevel
from ..utils.logger import aggregator_logger as logger
from .catalog import StageCatalog, get_catalog
from .risk_detector import RiskDetector
from .stage_normalizer import normalize_stage
from .trust_scorer import TrustScoreCalculator

INVESTOR_READY_MIN_SCORE = 80
MAX_AI_SUGGESTIONS = 3


def is_investor_ready(trust_score: int, risk_level: RiskLevel) -> bool:
    """True only for a trust score strictly above 80 with Low risk."""
    return trust_score > INVESTOR_READY_MIN_SCORE and risk_level == RiskLevel.LOW


class DocumentAggregator:
    """
    Service for building the aggregated document intelligence report.

    The trust score calculator and the risk detector share the aggregator's
    catalog so that one injected fixture drives the whole report.
    """

    def __init__(self, catalog: Optional[StageCatalog] = None):
        self.catalog = catalog or get_catalog()
        self.trust_scorer = TrustScoreCalculator(self.catalog)
        self.risk_detector = RiskDetector(self.catalog)

    def aggregate_analysis(self, stage, uploaded_doc_ids: Iterable[str],
                           analysis_results: List[AnalysisResult]) -> AggregatedOutput:
        """
        Aggregate every document signal into one report.

        Args:
            stage: Startup stage label, possibly legacy
            uploaded_doc_ids: Catalog ids of the uploaded documents
            analysis_results: Per-document AI analyses

        Returns:
            A freshly built AggregatedOutput
        """
        canonical = normalize_stage(stage)
        uploaded_ids = list(uploaded_doc_ids)
        uploaded = set(uploaded_ids)

        trust_score = self.trust_scorer.calculate_trust_score(canonical, analysis_results)
        ai_findings = [signal for result in analysis_results for signal in result.risk_signals]
        risk = self.risk_detector.detect_risks(uploaded_ids, canonical, ai_findings)

        stage_mandatory = self.catalog.mandatory_for(canonical)
        stage_optional = self.catalog.optional_for(canonical)

        missing_mandatory = [
            e.label for e in (*self.catalog.universal_mandatory, *stage_mandatory)
            if e.id not in uploaded
        ]
        missing_optional = [e.label for e in stage_optional if e.id not in uploaded]

        suggestions = [s for result in analysis_results for s in result.suggestions]
        recommendations = [f"Upload {label}" for label in missing_mandatory]
        recommendations.extend(suggestions[:MAX_AI_SUGGESTIONS])

        output = AggregatedOutput(
            startup_stage=canonical,
            trust_score=trust_score,
            risk_level=risk.level,
            missing_mandatory_documents=missing_mandatory,
            missing_optional_documents=missing_optional,
            key_risks=risk.flags,
            recommendations=recommendations,
            investor_ready=is_investor_ready(trust_score, risk.level),
            data_room=self._build_data_room(canonical, uploaded),
        )

        logger.info(
            f"Aggregated report for stage {canonical.value}: score={trust_score}, "
            f"risk={risk.level.value}, missing_mandatory={len(missing_mandatory)}, "
            f"investor_ready={output.investor_ready}"
        )
        return output

    def _build_data_room(self, stage, uploaded: set) -> Dict[str, List[str]]:
        """
        Group uploaded document labels by data-room category.

        Every fixed category is present, empty when nothing was uploaded for it.
        """
        data_room: Dict[str, List[str]] = {category: [] for category in self.catalog.data_room_categories}
        expected = (
            *self.catalog.universal,
            *self.catalog.mandatory_for(stage),
            *self.catalog.optional_for(stage),
        )
        for entry in expected:
            if entry.id in uploaded:
                data_room[entry.category].append(entry.label)
        return data_room
