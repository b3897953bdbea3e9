"""
Services package for the Document Intelligence Engine.
Contains the stage catalog and the scoring, risk and aggregation services.
"""

from .stage_normalizer import normalize_stage
from .catalog import StageCatalog, CatalogConfigError, load_catalog, get_catalog
from .trust_scorer import TrustScoreCalculator
from .risk_detector import RiskDetector
from .aggregator import DocumentAggregator, is_investor_ready
from .stage_validator import StageRequirementValidator
from .redis import redis_service, build_cache_key

__all__ = [
    'normalize_stage',            # Legacy stage label mapping
    'StageCatalog',               # Immutable stage requirement catalog
    'CatalogConfigError',         # Malformed catalog
    'load_catalog',
    'get_catalog',
    'TrustScoreCalculator',       # Weighted trust score
    'RiskDetector',               # Low/Medium/High classification
    'DocumentAggregator',         # Investor-facing report
    'is_investor_ready',
    'StageRequirementValidator',  # Pre-AI presence check
    'redis_service',              # Result cache
    'build_cache_key',
]
