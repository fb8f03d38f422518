# ABOUTME: Extracts generic asset records from a content item's elements
# ABOUTME: Rich text embedded images are promoted to assets alongside asset element values

from collections.abc import Iterable

from kontent_normalizer.core.models import (
    ASSET_MODEL_LABEL,
    ASSET_MODEL_NAME,
    EntryMetadata,
    NormalizedAsset,
    NormalizedModel,
)
from kontent_normalizer.kontent.types import ElementType, KontentItem
from kontent_normalizer.normalize.models import ModelIndex, resolve_model
from kontent_normalizer.normalize.urls import asset_id_from_url, asset_name_from_url, image_mime_type_from_url


def _asset_metadata(asset_url: str, item: KontentItem, model: NormalizedModel) -> EntryMetadata:
    # Project id and environment come from the owning model, not from the options
    return EntryMetadata(
        id=asset_id_from_url(asset_url),
        model_name=ASSET_MODEL_NAME,
        model_label=ASSET_MODEL_LABEL,
        project_id=model.project_id,
        project_environment=model.project_environment,
        created_at=item.system.last_modified,
        updated_at=item.system.last_modified,
    )


def normalize_assets_for_item(item: KontentItem, model: NormalizedModel) -> list[NormalizedAsset]:
    """Return the assets referenced by one item.

    Rich text images come first, then asset element values, each in element
    order. The same URL referenced twice yields two records.
    """
    elements = list(item.elements.values())
    assets: list[NormalizedAsset] = []

    for element in elements:
        if element.element_type is not ElementType.RICH_TEXT:
            continue
        for image in element.images:
            file_name = asset_name_from_url(image.url)
            assets.append(
                NormalizedAsset(
                    title=file_name,
                    content_type=image_mime_type_from_url(image.url),
                    file_name=file_name,
                    url=image.url,
                    metadata=_asset_metadata(image.url, item, model),
                )
            )

    for element in elements:
        if element.element_type is not ElementType.ASSET:
            continue
        for asset in element.asset_values():
            if not asset.url:
                continue
            assets.append(
                NormalizedAsset(
                    title=asset.name,
                    content_type=asset.type,
                    file_name=asset.name,
                    url=asset.url,
                    metadata=_asset_metadata(asset.url, item, model),
                )
            )

    return assets


def normalize_assets(items: Iterable[KontentItem], index: ModelIndex) -> list[NormalizedAsset]:
    assets: list[NormalizedAsset] = []
    for item in items:
        assets.extend(normalize_assets_for_item(item, resolve_model(item, index)))
    return assets
