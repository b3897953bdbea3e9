"""
Stage Normalizer Module

Maps loose and legacy stage labels ("Ideation", "Pre-seed", "Series A", ...)
onto the canonical stage keys of the stage catalog.
"""

from typing import Optional, Union

from ..schemas import StartupStage

# Checked in order; "pre-seed" must be tested before "seed".
STAGE_ALIASES = (
    (("ideation", "pre-seed", "idea"), StartupStage.IDEA),
    (("mvp", "prototype"), StartupStage.MVP),
    (("seed",), StartupStage.SEED),
    (("growth", "series", "scaled"), StartupStage.GROWTH),
)

DEFAULT_STAGE = StartupStage.IDEA


def normalize_stage(stage: Optional[Union[str, StartupStage]]) -> StartupStage:
    """
    Resolve any stage label to a canonical StartupStage.

    Never fails: empty or unrecognized labels fall back to the earliest stage.

    Args:
        stage: Stage label as entered by the startup, possibly legacy

    Returns:
        Canonical stage
    """
    if isinstance(stage, StartupStage):
        return stage
    if not stage:
        return DEFAULT_STAGE

    value = str(stage).lower().strip()
    for aliases, canonical in STAGE_ALIASES:
        if any(alias in value for alias in aliases):
            return canonical

    return DEFAULT_STAGE
