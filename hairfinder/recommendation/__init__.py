"""
Recommendation Engine

Version: recommendation_engine_v1
"""

from .models import (
    StyleRiskInput,
    StyleRiskRecommendation,
    AreaMatch,
    ProductRecommendation,
    ProductPriority,
    ProductTiers,
    EducationLesson,
    LessonUrgency,
    ActionItem,
    ActionPlan,
)
from .engine import (
    EDUCATION_TOPICS,
    GENERIC_LESSON_TITLE,
    STYLING_EXPLAINED_MIN_RATE,
    match_affected_areas,
    recommend_products,
    generate_education,
    create_action_plan,
    generate_summary,
    generate_recommendations,
)

__all__ = [
    "StyleRiskInput",
    "StyleRiskRecommendation",
    "AreaMatch",
    "ProductRecommendation",
    "ProductPriority",
    "ProductTiers",
    "EducationLesson",
    "LessonUrgency",
    "ActionItem",
    "ActionPlan",
    "EDUCATION_TOPICS",
    "GENERIC_LESSON_TITLE",
    "STYLING_EXPLAINED_MIN_RATE",
    "match_affected_areas",
    "recommend_products",
    "generate_education",
    "create_action_plan",
    "generate_summary",
    "generate_recommendations",
]

__version__ = "recommendation_engine_v1"
