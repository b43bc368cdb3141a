"""
Severity & Bundle Selector

Version: severity_v1
"""

from .models import BundleName, BundleUsage, SeverityRecommendation
from .select import (
    Bundle,
    BUNDLES,
    SEVERITY_BUNDLE_THRESHOLD,
    PRIMARY_DIAGNOSIS_POINTS,
    URGENT_SHAMPOO,
    URGENT_CONDITIONER,
    POSTPARTUM_REASSURANCE,
    calculate_severity_score,
    bundle_for_score,
    select_bundle,
)

__all__ = [
    "BundleName",
    "BundleUsage",
    "SeverityRecommendation",
    "Bundle",
    "BUNDLES",
    "SEVERITY_BUNDLE_THRESHOLD",
    "PRIMARY_DIAGNOSIS_POINTS",
    "URGENT_SHAMPOO",
    "URGENT_CONDITIONER",
    "POSTPARTUM_REASSURANCE",
    "calculate_severity_score",
    "bundle_for_score",
    "select_bundle",
]

__version__ = "severity_v1"
