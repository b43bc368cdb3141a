"""
Style Risk Profiles

Static reference data: traction risk per protective style.

riskScore runs 1-10. High tension styles score 8-10, medium 4-7,
low 1-3. Unknown style ids are not an error; callers treat them as zero
risk with no concerns and no affected areas.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class TensionType(str, Enum):
    INSTALLATION = "installation"
    PULLING = "pulling"
    CHEMICAL = "chemical"
    COMBINED = "combined"
    WEIGHT = "weight"
    MINIMAL = "minimal"
    PROTECTIVE = "protective"
    NONE = "none"


class DamageType(str, Enum):
    EXTREME_TENSION = "extreme_tension"
    CONSTANT_TENSION = "constant_tension"
    ADHESIVE_DAMAGE = "adhesive_damage"
    TIGHT_BRAIDING = "tight_braiding"
    WEIGHT_PLUS_TENSION = "weight_plus_tension"
    MODERATE_TENSION = "moderate_tension"
    GRAVITATIONAL_PULL = "gravitational_pull"
    LOW_MANIPULATION = "low_manipulation"
    NO_TENSION = "no_tension"


@dataclass(frozen=True)
class StyleRiskProfile:
    """Risk record for one normalized style id."""
    risk_score: int
    tension_type: TensionType
    affected_areas: Tuple[str, ...]
    concerns: Tuple[str, ...]
    damage_type: DamageType

    def to_dict(self) -> Dict[str, object]:
        return {
            "risk_score": self.risk_score,
            "tension_type": self.tension_type.value,
            "affected_areas": list(self.affected_areas),
            "concerns": list(self.concerns),
            "damage_type": self.damage_type.value,
        }


# Weight-bearing styles used by the balanced_approach pattern
WEIGHT_BEARING_STYLES = ("dreadlocs", "faux_locs", "box_braids")

LOW_RISK_MAX = 3
HIGH_TENSION_MIN = 8


STYLE_RISK_PROFILES: Dict[str, StyleRiskProfile] = {
    # ===== HIGH TENSION (8-10) =====
    "micro_twists": StyleRiskProfile(
        risk_score=10,
        tension_type=TensionType.INSTALLATION,
        affected_areas=("edges", "temples", "crown"),
        concerns=("edge_damage", "traction_alopecia", "breakage"),
        damage_type=DamageType.EXTREME_TENSION,
    ),
    "tight_ponytails": StyleRiskProfile(
        risk_score=9,
        tension_type=TensionType.PULLING,
        affected_areas=("edges", "temples"),
        concerns=("edge_damage", "traction_alopecia", "hairline_recession"),
        damage_type=DamageType.CONSTANT_TENSION,
    ),
    "wigs_glue": StyleRiskProfile(
        risk_score=9,
        tension_type=TensionType.CHEMICAL,
        affected_areas=("edges", "temples", "hairline"),
        concerns=("chemical_damage", "edge_damage", "scalp_irritation"),
        damage_type=DamageType.ADHESIVE_DAMAGE,
    ),
    "allback_cornrows": StyleRiskProfile(
        risk_score=8,
        tension_type=TensionType.INSTALLATION,
        affected_areas=("edges", "temples", "crown"),
        concerns=("traction_alopecia", "edge_damage"),
        damage_type=DamageType.TIGHT_BRAIDING,
    ),
    "ghana_weaving": StyleRiskProfile(
        risk_score=8,
        tension_type=TensionType.INSTALLATION,
        affected_areas=("edges", "temples"),
        concerns=("traction_alopecia", "edge_damage"),
        damage_type=DamageType.TIGHT_BRAIDING,
    ),

    # ===== MEDIUM TENSION (4-7) =====
    "box_braids": StyleRiskProfile(
        risk_score=6,
        tension_type=TensionType.INSTALLATION,
        affected_areas=("crown", "nape"),
        concerns=("weight_stress", "breakage"),
        damage_type=DamageType.MODERATE_TENSION,
    ),
    "faux_locs": StyleRiskProfile(
        risk_score=7,
        tension_type=TensionType.COMBINED,
        affected_areas=("edges", "crown"),
        concerns=("weight_stress", "installation_tension"),
        damage_type=DamageType.WEIGHT_PLUS_TENSION,
    ),
    "weaves": StyleRiskProfile(
        risk_score=6,
        tension_type=TensionType.INSTALLATION,
        affected_areas=("crown", "perimeter"),
        concerns=("weight_stress", "breakage"),
        damage_type=DamageType.MODERATE_TENSION,
    ),
    "crochet": StyleRiskProfile(
        risk_score=5,
        tension_type=TensionType.INSTALLATION,
        affected_areas=("crown",),
        concerns=("breakage",),
        damage_type=DamageType.MODERATE_TENSION,
    ),
    "dreadlocs": StyleRiskProfile(
        risk_score=5,
        tension_type=TensionType.WEIGHT,
        affected_areas=("crown", "edges"),
        concerns=("weight_stress", "root_weakness"),
        damage_type=DamageType.GRAVITATIONAL_PULL,
    ),
    "one_million_braids": StyleRiskProfile(
        risk_score=7,
        tension_type=TensionType.COMBINED,
        affected_areas=("edges", "crown"),
        concerns=("weight_stress", "installation_tension", "edge_damage"),
        damage_type=DamageType.WEIGHT_PLUS_TENSION,
    ),

    # ===== LOW TENSION (1-3) =====
    "twists_senegalese": StyleRiskProfile(
        risk_score=3,
        tension_type=TensionType.MINIMAL,
        affected_areas=(),
        concerns=("minimal_risk",),
        damage_type=DamageType.LOW_MANIPULATION,
    ),
    "wigs_no_glue": StyleRiskProfile(
        risk_score=2,
        tension_type=TensionType.MINIMAL,
        affected_areas=(),
        concerns=("minimal_risk",),
        damage_type=DamageType.LOW_MANIPULATION,
    ),
    "threading_didi": StyleRiskProfile(
        risk_score=3,
        tension_type=TensionType.PROTECTIVE,
        affected_areas=(),
        concerns=("minimal_risk",),
        damage_type=DamageType.LOW_MANIPULATION,
    ),
    "natural_hair": StyleRiskProfile(
        risk_score=1,
        tension_type=TensionType.NONE,
        affected_areas=(),
        concerns=("minimal_risk",),
        damage_type=DamageType.NO_TENSION,
    ),
}


def lookup(style_id: str) -> Optional[StyleRiskProfile]:
    """Return the risk profile for a style id, or None if unknown."""
    return STYLE_RISK_PROFILES.get(style_id)


def individual_risk(style_id: str) -> int:
    """Risk score of one style; unknown styles contribute 0."""
    profile = STYLE_RISK_PROFILES.get(style_id)
    return profile.risk_score if profile else 0
