# ABOUTME: Pure mapping functions from Kontent payloads to generic records
# ABOUTME: No I/O and no logging; errors are raised for the batch service to collect

from kontent_normalizer.errors import (
    ElementValueError,
    MalformedAssetUrlWarning,
    ModelResolutionError,
    NormalizationBatchError,
    NormalizationError,
)

from .assets import normalize_assets, normalize_assets_for_item
from .entries import normalize_entries, normalize_entry
from .models import index_models, normalize_model, normalize_models, resolve_model
from .values import project_element_value

__all__ = [
    "ElementValueError",
    "MalformedAssetUrlWarning",
    "ModelResolutionError",
    "NormalizationBatchError",
    "NormalizationError",
    "index_models",
    "normalize_assets",
    "normalize_assets_for_item",
    "normalize_entries",
    "normalize_entry",
    "normalize_model",
    "normalize_models",
    "project_element_value",
    "resolve_model",
]
