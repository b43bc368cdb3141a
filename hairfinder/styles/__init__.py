"""
Styles Layer

Style risk profile table and the risk analyzer built on it.

Version: risk_analyzer_v1
"""

from .profiles import (
    STYLE_RISK_PROFILES,
    StyleRiskProfile,
    TensionType,
    DamageType,
    lookup,
    individual_risk,
)
from .models import (
    RiskLevel,
    RiskScore,
    Concerns,
    ConcernFrequency,
    Pattern,
    PatternSeverity,
)
from .risk import (
    RiskAnalyzer,
    risk_analyzer,
    calculate_risk_score,
    identify_primary_concerns,
    detect_patterns,
    get_risk_level,
)

__all__ = [
    "STYLE_RISK_PROFILES",
    "StyleRiskProfile",
    "TensionType",
    "DamageType",
    "lookup",
    "individual_risk",
    "RiskLevel",
    "RiskScore",
    "Concerns",
    "ConcernFrequency",
    "Pattern",
    "PatternSeverity",
    "RiskAnalyzer",
    "risk_analyzer",
    "calculate_risk_score",
    "identify_primary_concerns",
    "detect_patterns",
    "get_risk_level",
]

__version__ = "risk_analyzer_v1"
