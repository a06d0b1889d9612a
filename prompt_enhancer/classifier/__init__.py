"""
Keyword-driven prompt classification helpers.
"""

from .categories import Category, CategoryDefinition, normalize_category
from .layer import ClassificationLayer, ClassificationResult, classify

__all__ = [
    "Category",
    "CategoryDefinition",
    "ClassificationLayer",
    "ClassificationResult",
    "classify",
    "normalize_category",
]
