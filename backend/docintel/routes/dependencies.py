"""
Route Dependencies

FastAPI dependency providers for the catalog, scoring services and result
cache. Tests swap these out through app.dependency_overrides.
"""

from typing import Optional

from fastapi import Depends

from ..services.aggregator import DocumentAggregator
from ..services.catalog import StageCatalog, get_catalog
from ..services.redis import RedisService, redis_service
from ..services.risk_detector import RiskDetector
from ..services.stage_validator import StageRequirementValidator
from ..services.trust_scorer import TrustScoreCalculator
from ..utils.config import settings


def get_stage_catalog() -> StageCatalog:
    return get_catalog()


def get_trust_scorer(catalog: StageCatalog = Depends(get_stage_catalog)) -> TrustScoreCalculator:
    return TrustScoreCalculator(catalog)


def get_risk_detector(catalog: StageCatalog = Depends(get_stage_catalog)) -> RiskDetector:
    return RiskDetector(catalog)


def get_aggregator(catalog: StageCatalog = Depends(get_stage_catalog)) -> DocumentAggregator:
    return DocumentAggregator(catalog)


def get_stage_validator(catalog: StageCatalog = Depends(get_stage_catalog)) -> StageRequirementValidator:
    return StageRequirementValidator(catalog)


def get_result_cache() -> Optional[RedisService]:
    """Result cache, or None when caching is disabled."""
    return redis_service if settings.CACHE_ENABLED else None
