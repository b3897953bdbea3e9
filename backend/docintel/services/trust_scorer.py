"""
Trust Score Module

Service for calculating a startup's investor trust score (0-100) from the
AI analyses of its uploaded documents.

Score = Completeness (40) + Stage Fit (25) + Consistency (20) + Legal Clarity (15)
        - Risk Penalty (max 30)
"""

import math
from typing import List, Optional, Sequence

from ..schemas import AnalysisResult, DocumentCatalogEntry
from ..utils.logger import scorer_logger as logger
from .catalog import StageCatalog, get_catalog
from .stage_normalizer import normalize_stage

COMPLETENESS_WEIGHT = 40
STAGE_FIT_WEIGHT = 25
CONSISTENCY_WEIGHT = 20
LEGAL_WEIGHT = 15

SECTIONS_MULTIPLIER = 4
RISK_SIGNAL_PENALTY = 5
MAX_RISK_PENALTY = 30
IRRELEVANT_MARKER = "irrelevant"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _find_analysis(entry: DocumentCatalogEntry,
                   analysis_results: Sequence[AnalysisResult]) -> Optional[AnalysisResult]:
    """First analysis whose document_type equals the entry label."""
    for result in analysis_results:
        if result.document_type == entry.label:
            return result
    return None


def _is_quality_validated(result: Optional[AnalysisResult]) -> bool:
    if result is None:
        return False
    if len(result.sections_detected) <= 1:
        return False
    return not any(IRRELEVANT_MARKER in signal.lower() for signal in result.risk_signals)


class TrustScoreCalculator:
    """
    Service for calculating the weighted trust score.

    Analyses are matched to catalog entries by label, not id.
    """

    def __init__(self, catalog: Optional[StageCatalog] = None):
        self.catalog = catalog or get_catalog()

    def calculate_trust_score(self, stage, analysis_results: List[AnalysisResult]) -> int:
        """
        Calculate the final trust score (0-100).

        Args:
            stage: Startup stage label, possibly legacy
            analysis_results: Per-document AI analyses

        Returns:
            Integer trust score clamped to [0, 100]
        """
        canonical = normalize_stage(stage)
        universal_mandatory = [
            entry for entry in self.catalog.universal
            if entry.is_mandatory or entry.category == self.catalog.legal_category
        ]
        stage_mandatory = list(self.catalog.mandatory_for(canonical))
        all_mandatory = universal_mandatory + stage_mandatory

        completeness = self._validated_share(all_mandatory, analysis_results) * COMPLETENESS_WEIGHT
        stage_fit = self._validated_share(stage_mandatory, analysis_results) * STAGE_FIT_WEIGHT
        consistency = self._calculate_consistency_score(analysis_results)
        legal = self._calculate_legal_score(analysis_results)
        penalty = self._calculate_risk_penalty(analysis_results)

        raw_score = completeness + stage_fit + consistency + legal - penalty
        final_score = max(0, min(100, _round_half_up(raw_score)))

        logger.info(
            f"Trust score for stage {canonical.value}: "
            f"Completeness={completeness:.2f}, StageFit={stage_fit:.2f}, "
            f"Consistency={consistency:.2f}, Legal={legal:.2f}, "
            f"Penalty={penalty}, Final={final_score}"
        )
        return final_score

    def _validated_share(self, entries: Sequence[DocumentCatalogEntry],
                         analysis_results: Sequence[AnalysisResult]) -> float:
        """Fraction of entries backed by a quality-validated analysis (0 when no entries)."""
        if not entries:
            return 0.0
        validated = sum(
            1 for entry in entries
            if _is_quality_validated(_find_analysis(entry, analysis_results))
        )
        return validated / len(entries)

    def _calculate_consistency_score(self, analysis_results: Sequence[AnalysisResult]) -> float:
        """Average detected sections per analysis, scaled and capped at the weight."""
        if not analysis_results:
            return 0.0
        total_sections = sum(len(result.sections_detected) for result in analysis_results)
        avg_sections = total_sections / len(analysis_results)
        return min(CONSISTENCY_WEIGHT, avg_sections * SECTIONS_MULTIPLIER)

    def _calculate_legal_score(self, analysis_results: Sequence[AnalysisResult]) -> float:
        # One detected section is enough here, unlike completeness and stage fit.
        legal_entries = self.catalog.legal_entries
        if not legal_entries:
            return 0.0
        covered = 0
        for entry in legal_entries:
            result = _find_analysis(entry, analysis_results)
            if result is not None and len(result.sections_detected) > 0:
                covered += 1
        return (covered / len(legal_entries)) * LEGAL_WEIGHT

    def _calculate_risk_penalty(self, analysis_results: Sequence[AnalysisResult]) -> int:
        total_signals = sum(len(result.risk_signals) for result in analysis_results)
        return min(MAX_RISK_PENALTY, total_signals * RISK_SIGNAL_PENALTY)

