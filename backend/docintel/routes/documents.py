"""
Document Intelligence Routes Module

This module exposes the scoring engine over HTTP: the pre-AI stage check,
trust score, risk detection and the full aggregated report.

Key Features:
- Stateless request handling
- Content-hash result cache for aggregation
- Pydantic request/response validation
"""

from typing import Optional

from fastapi import APIRouter, Depends

from ..schemas import (
    AggregatedOutput,
    AggregationRequest,
    RiskAssessment,
    RiskRequest,
    TrustScoreRequest,
    TrustScoreResponse,
    ValidationRequest,
    ValidationResult,
)
from ..services.aggregator import DocumentAggregator
from ..services.redis import RedisService, build_cache_key
from ..services.risk_detector import RiskDetector
from ..services.stage_normalizer import normalize_stage
from ..services.stage_validator import StageRequirementValidator
from ..services.trust_scorer import TrustScoreCalculator
from ..utils.config import settings
from ..utils.logger import api_logger as logger
from .dependencies import (
    get_aggregator,
    get_result_cache,
    get_risk_detector,
    get_stage_validator,
    get_trust_scorer,
)

router = APIRouter(tags=["Documents"])


@router.post("/validate", response_model=ValidationResult)
async def validate_documents(
    request: ValidationRequest,
    validator: StageRequirementValidator = Depends(get_stage_validator)
):
    """Check that the mandatory documents for the stage have been uploaded."""
    return validator.validate_stage_requirements(request.uploaded_doc_ids, request.stage)


@router.post("/trust-score", response_model=TrustScoreResponse)
async def trust_score(
    request: TrustScoreRequest,
    scorer: TrustScoreCalculator = Depends(get_trust_scorer)
):
    """Calculate the trust score from the document analyses."""
    stage = normalize_stage(request.stage)
    score = scorer.calculate_trust_score(stage, request.analysis_results)
    return TrustScoreResponse(startup_stage=stage, trust_score=score)


@router.post("/risks", response_model=RiskAssessment)
async def detect_risks(
    request: RiskRequest,
    detector: RiskDetector = Depends(get_risk_detector)
):
    """Classify document risk from missing mandatory documents and AI findings."""
    return detector.detect_risks(request.uploaded_doc_ids, request.stage, request.ai_findings)


@router.post("/aggregate", response_model=AggregatedOutput)
async def aggregate_documents(
    request: AggregationRequest,
    aggregator: DocumentAggregator = Depends(get_aggregator),
    cache: Optional[RedisService] = Depends(get_result_cache)
):
    """
    Build the investor-facing document intelligence report.

    Results are cached by request content; a cache hit returns the same
    report the engine would compute.
    """
    cache_key = build_cache_key("aggregate", request.model_dump(mode="json"))

    if cache is not None:
        cached_data = await cache.get(cache_key)
        if cached_data:
            logger.info(f"Cache hit for {cache_key}")
            return AggregatedOutput(**cached_data)

    result = aggregator.aggregate_analysis(
        request.stage,
        request.uploaded_doc_ids,
        request.analysis_results,
    )

    if cache is not None:
        await cache.set(cache_key, result.model_dump(mode="json"), expire=settings.CACHE_TTL_SECONDS)

    return result
