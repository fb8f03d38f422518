# ABOUTME: Maps Kontent content types to generic models and resolves items to them
# ABOUTME: Model lookup is strict: exactly one model per item type codename

from collections import defaultdict
from collections.abc import Iterable

from kontent_normalizer.core.models import KontentOptions, NormalizedModel
from kontent_normalizer.kontent.types import KontentItem, KontentType
from kontent_normalizer.errors import ModelResolutionError

ModelIndex = dict[str, list[NormalizedModel]]


def normalize_model(content_type: KontentType, options: KontentOptions) -> NormalizedModel:
    """Build the generic model for one content type, keeping element declaration order."""
    return NormalizedModel(
        name=content_type.system.codename,
        label=content_type.system.name,
        project_id=options.project_id,
        project_environment=options.project_environment,
        field_names=[element.codename for element in content_type.elements],
    )


def normalize_models(content_types: Iterable[KontentType], options: KontentOptions) -> list[NormalizedModel]:
    return [normalize_model(content_type, options) for content_type in content_types]


def index_models(models: Iterable[NormalizedModel]) -> ModelIndex:
    """Group models by name so lookups can detect both misses and duplicates."""
    index: ModelIndex = defaultdict(list)
    for model in models:
        index[model.name].append(model)
    return dict(index)


def resolve_model(item: KontentItem, index: ModelIndex) -> NormalizedModel:
    """Return the single model matching the item's type codename.

    Raises:
        ModelResolutionError: If zero or several models match
    """
    matches = index.get(item.type_codename, [])
    if len(matches) != 1:
        raise ModelResolutionError(
            item_id=item.system.id,
            item_codename=item.system.codename,
            type_codename=item.type_codename,
            match_count=len(matches),
        )
    return matches[0]
