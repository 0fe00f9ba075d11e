from .bullet_enhancer import BULLET_ENHANCEMENTS, GENERIC_ENHANCEMENT, enhance_bullet_point
from .scoring import KeywordMatch, match_percentage, score_band, score_keywords
from .suggestions import SUGGESTION_BUILDERS, generate_suggestions

__all__ = [
    "BULLET_ENHANCEMENTS",
    "GENERIC_ENHANCEMENT",
    "enhance_bullet_point",
    "KeywordMatch",
    "match_percentage",
    "score_band",
    "score_keywords",
    "SUGGESTION_BUILDERS",
    "generate_suggestions",
]
