# ABOUTME: Maps Kontent content items to generic entries
# ABOUTME: Element values go through the projector; the raw item is attached on request

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from kontent_normalizer.core.models import EntryMetadata, KontentOptions, NormalizedEntry, NormalizedModel
from kontent_normalizer.kontent.types import KontentItem
from kontent_normalizer.normalize.models import ModelIndex, resolve_model
from kontent_normalizer.normalize.values import project_element_value


def normalize_entry(
    item: KontentItem,
    model: NormalizedModel,
    options: KontentOptions,
    raw_item: Mapping[str, Any] | None = None,
) -> NormalizedEntry:
    """Build the generic entry for one item using its already resolved model.

    When the options request Kontent metadata, `raw_item` (the payload the item
    was parsed from) is attached as a deep copy. Without it, the parsed item is
    dumped back with only the fields the source actually set.
    """
    metadata = EntryMetadata(
        id=item.system.codename,
        model_name=model.name,
        model_label=model.label,
        project_id=options.project_id,
        project_environment=options.project_environment,
        created_at=item.system.last_modified,
        updated_at=item.system.last_modified,
    )

    fields = {codename: project_element_value(element) for codename, element in item.elements.items()}

    kontent_metadata = None
    if options.include_kontent_metadata:
        if raw_item is not None:
            kontent_metadata = copy.deepcopy(dict(raw_item))
        else:
            kontent_metadata = item.model_dump(mode="json", exclude_unset=True)

    return NormalizedEntry(fields=fields, metadata=metadata, kontent_metadata=kontent_metadata)


def normalize_entries(
    items: Iterable[KontentItem], index: ModelIndex, options: KontentOptions
) -> list[NormalizedEntry]:
    """Map every item, failing fast on the first model resolution error."""
    return [normalize_entry(item, resolve_model(item, index), options) for item in items]
