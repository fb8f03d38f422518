# ABOUTME: Projects one typed Kontent element into its generic field value
# ABOUTME: Asset and multiple choice elements are coerced, everything else passes through

import copy
from typing import Any

from kontent_normalizer.kontent.types import ElementType, KontentItemElement


def project_element_value(element: KontentItemElement) -> Any:
    """Return the generic value for a content element.

    - asset: URL of the first asset, or "" (only one asset per field is supported)
    - multiple_choice: list of selected option names, or [] when the value is null
    - anything else: a copy of the raw value, or "" when the value is null
    """
    match element.element_type:
        case ElementType.ASSET:
            assets = element.asset_values()
            if assets and assets[0].url:
                return assets[0].url
            return ""
        case ElementType.MULTIPLE_CHOICE:
            if element.value is None:
                return []
            return [option.name for option in element.selected_options()]
        case _:
            if element.value is None:
                return ""
            return copy.deepcopy(element.value)
