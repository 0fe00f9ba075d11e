from .vocabulary import ALL_KEYWORDS, SOFT_SKILLS, TECH_KEYWORDS, extract_keywords

__all__ = ["ALL_KEYWORDS", "SOFT_SKILLS", "TECH_KEYWORDS", "extract_keywords"]
