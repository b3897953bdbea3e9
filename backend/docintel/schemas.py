"""
Schemas Module

This module defines the Pydantic models shared by the scoring services and the API.
Includes the stage catalog records, the per-document AI analysis record and the
result types produced by the validator, risk detector and aggregator.

Key Features:
- Explicit typed records for catalog entries and analyses
- Response serialization for the API layer
- Request bodies with sensible defaults for empty inputs
"""
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StartupStage(str, Enum):
    """Canonical startup growth stages used to key the stage catalog."""
    IDEA = "Idea"
    MVP = "MVP"
    SEED = "Seed"
    GROWTH = "Growth"


class RiskLevel(str, Enum):
    """Overall risk classification."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class StageRelevance(str, Enum):
    MANDATORY = "Mandatory"
    OPTIONAL = "Optional"


# Catalog schemas
class DocumentCatalogEntry(BaseModel):
    """Schema representing one expected document in the stage catalog."""
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    category: str
    is_mandatory: bool = False
    description: Optional[str] = None

    @field_validator('id', 'label')
    @classmethod
    def validate_not_blank(cls, v):
        """Ids and labels are used as match keys and must not be blank."""
        if not v or not v.strip():
            raise ValueError('must not be blank')
        return v


class StageRequirements(BaseModel):
    """Documents expected for a single canonical stage."""
    model_config = ConfigDict(frozen=True)

    stage: StartupStage
    universal: List[DocumentCatalogEntry] = Field(default_factory=list)
    mandatory: List[DocumentCatalogEntry] = Field(default_factory=list)
    optional: List[DocumentCatalogEntry] = Field(default_factory=list)


class StageListResponse(BaseModel):
    stages: List[StartupStage]
    data_room_categories: List[str]


# Analysis schemas
class AnalysisResult(BaseModel):
    """
    Per-document output of the external AI document-analysis collaborator.

    `document_type` is matched against a catalog entry's label, not its id.
    """
    document_type: str
    stage_relevance: StageRelevance = StageRelevance.OPTIONAL
    sections_detected: List[str] = Field(default_factory=list)
    summary: str = ""
    missing_sections: List[str] = Field(default_factory=list)
    risk_signals: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


# Result schemas
class RiskAssessment(BaseModel):
    level: RiskLevel
    flags: List[str] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """Outcome of the pre-AI stage requirement presence check."""
    is_passed: bool
    missing_mandatory: List[str] = Field(default_factory=list)
    missing_universal: List[str] = Field(default_factory=list)
    risk_level: RiskLevel


class TrustScoreResponse(BaseModel):
    startup_stage: StartupStage
    trust_score: int = Field(..., ge=0, le=100)


class AggregatedOutput(BaseModel):
    """Investor-facing report built fresh on every aggregation call."""
    startup_stage: StartupStage
    trust_score: int = Field(..., ge=0, le=100)
    risk_level: RiskLevel
    missing_mandatory_documents: List[str] = Field(default_factory=list)
    missing_optional_documents: List[str] = Field(default_factory=list)
    key_risks: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    investor_ready: bool
    data_room: Dict[str, List[str]] = Field(default_factory=dict)


# Request schemas
class ValidationRequest(BaseModel):
    stage: Optional[str] = None
    uploaded_doc_ids: List[str] = Field(default_factory=list)


class TrustScoreRequest(BaseModel):
    stage: Optional[str] = None
    analysis_results: List[AnalysisResult] = Field(default_factory=list)


class RiskRequest(BaseModel):
    stage: Optional[str] = None
    uploaded_doc_ids: List[str] = Field(default_factory=list)
    ai_findings: List[str] = Field(default_factory=list)


class AggregationRequest(BaseModel):
    stage: Optional[str] = None
    uploaded_doc_ids: List[str] = Field(default_factory=list)
    analysis_results: List[AnalysisResult] = Field(default_factory=list)


# Error response schema
class ErrorDetail(BaseModel):
    code: int
    message: str
    type: str


class ErrorResponse(BaseModel):
    """Schema for API error responses."""
    error: ErrorDetail
