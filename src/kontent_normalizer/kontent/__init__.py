# ABOUTME: Kontent Delivery API wire shapes consumed by the normalizer
# ABOUTME: Pydantic models for content types, content items and their typed elements

from .types import (
    AssetValue,
    ElementType,
    KontentItem,
    KontentItemElement,
    KontentItemSystem,
    KontentType,
    KontentTypeElement,
    KontentTypeSystem,
    MultipleChoiceOption,
    RichTextImage,
)

__all__ = [
    "AssetValue",
    "ElementType",
    "KontentItem",
    "KontentItemElement",
    "KontentItemSystem",
    "KontentType",
    "KontentTypeElement",
    "KontentTypeSystem",
    "MultipleChoiceOption",
    "RichTextImage",
]
