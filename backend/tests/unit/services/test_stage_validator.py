"""
Unit tests for the pre-AI stage requirement validator.
"""
from docintel.schemas import RiskLevel
from docintel.services.stage_validator import StageRequirementValidator


def test_nothing_uploaded(catalog):
    result = StageRequirementValidator(catalog).validate_stage_requirements([], "Seed")
    assert result.is_passed is False
    assert result.risk_level == RiskLevel.HIGH
    assert result.missing_universal == [e.label for e in catalog.universal_mandatory]
    assert result.missing_mandatory == [e.label for e in catalog.mandatory_for("Seed")]


def test_only_stage_documents_missing_is_medium(catalog):
    uploaded = [e.id for e in catalog.universal_mandatory]
    result = StageRequirementValidator(catalog).validate_stage_requirements(uploaded, "MVP")
    assert result.is_passed is False
    assert result.risk_level == RiskLevel.MEDIUM
    assert result.missing_universal == []
    assert "Cap Table" in result.missing_mandatory


def test_universal_missing_outranks_stage_complete(catalog):
    uploaded = [e.id for e in catalog.mandatory_for("Growth")]
    result = StageRequirementValidator(catalog).validate_stage_requirements(uploaded, "Growth")
    assert result.risk_level == RiskLevel.HIGH
    assert result.missing_mandatory == []


def test_all_mandatory_uploaded_passes(catalog):
    uploaded = [e.id for e in catalog.universal_mandatory] + [e.id for e in catalog.mandatory_for("Idea")]
    result = StageRequirementValidator(catalog).validate_stage_requirements(uploaded, "Pre-seed")
    assert result.is_passed is True
    assert result.risk_level == RiskLevel.LOW
    assert result.missing_mandatory == []
    assert result.missing_universal == []


def test_optional_documents_are_not_required(catalog):
    uploaded = [e.id for e in catalog.universal_mandatory] + [e.id for e in catalog.mandatory_for("Seed")]
    result = StageRequirementValidator(catalog).validate_stage_requirements(uploaded, "Seed")
    assert result.is_passed is True


def test_unknown_stage_uses_idea_requirements(catalog):
    uploaded = [e.id for e in catalog.universal_mandatory]
    result = StageRequirementValidator(catalog).validate_stage_requirements(uploaded, "something else")
    assert result.missing_mandatory == [e.label for e in catalog.mandatory_for("Idea")]
