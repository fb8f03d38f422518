# ABOUTME: Generic output models and the batch normalization service
# ABOUTME: Orchestrates models, entries and assets passes over a full content snapshot

"""
Core Layer: Generic records and batch orchestration

This layer handles:
- Run options and the generic Model / Entry / Asset records
- The batch service that runs the pure mappers over a snapshot
- Per-item failure collection so one bad item never aborts the run

Data Flow: Kontent payloads → normalize/ mappers → NormalizationResult
"""

from .models import (
    ASSET_MODEL_LABEL,
    ASSET_MODEL_NAME,
    SOURCE_NAME,
    EntryMetadata,
    KontentOptions,
    NormalizationFailure,
    NormalizationResult,
    NormalizedAsset,
    NormalizedEntry,
    NormalizedModel,
)

# Import service on-demand to avoid circular imports
# Use: from kontent_normalizer.core.service import NormalizationService

__all__ = [
    "ASSET_MODEL_LABEL",
    "ASSET_MODEL_NAME",
    "SOURCE_NAME",
    "EntryMetadata",
    "KontentOptions",
    "NormalizationFailure",
    "NormalizationResult",
    "NormalizedAsset",
    "NormalizedEntry",
    "NormalizedModel",
]
