# ABOUTME: Kontent headless CMS content normalization into the generic Sourcebit shape
# ABOUTME: Exposes the batch normalize() entrypoint and the generic output models

from kontent_normalizer.core.models import (
    SOURCE_NAME,
    KontentOptions,
    NormalizationFailure,
    NormalizationResult,
    NormalizedAsset,
    NormalizedEntry,
    NormalizedModel,
)
from kontent_normalizer.core.service import NormalizationService, normalize

__all__ = [
    "SOURCE_NAME",
    "KontentOptions",
    "NormalizationFailure",
    "NormalizationResult",
    "NormalizationService",
    "NormalizedAsset",
    "NormalizedEntry",
    "NormalizedModel",
    "normalize",
]
