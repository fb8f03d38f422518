# ABOUTME: Batch service running the normalization mappers over a Kontent snapshot
# ABOUTME: Collects per-item failures alongside the produced models, entries and assets

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from kontent_normalizer.core.models import (
    KontentOptions,
    NormalizationFailure,
    NormalizationResult,
    NormalizedAsset,
    NormalizedEntry,
    NormalizedModel,
)
from kontent_normalizer.errors import NormalizationError
from kontent_normalizer.kontent.types import KontentItem, KontentType
from kontent_normalizer.normalize import (
    index_models,
    normalize_assets_for_item,
    normalize_entry,
    normalize_model,
    resolve_model,
)
from kontent_normalizer.normalize.urls import MISSING_ASSET_ID
from kontent_normalizer.utils.logging import get_logger, with_item_context, with_operation_context

RECOVERABLE_ERRORS = (NormalizationError, ValidationError)

TypePayload = KontentType | Mapping[str, Any]
ItemPayload = KontentItem | Mapping[str, Any]


def _system_field(payload: Any, name: str) -> str:
    """Best-effort read of a system field from a payload that may not have parsed."""
    if isinstance(payload, KontentType | KontentItem):
        return str(getattr(payload.system, name, "") or "")
    if isinstance(payload, Mapping):
        system = payload.get("system")
        if isinstance(system, Mapping):
            return str(system.get(name) or "")
    return ""


def _failure(stage: str, payload: Any, exc: Exception) -> NormalizationFailure:
    return NormalizationFailure(
        stage=stage,
        item_id=_system_field(payload, "id"),
        item_codename=_system_field(payload, "codename"),
        type_codename=_system_field(payload, "type") if stage != "model" else _system_field(payload, "codename"),
        error=str(exc),
        error_type=type(exc).__name__,
        exception=exc,
    )


def _log_malformed_asset_urls(logger, assets: list[NormalizedAsset]) -> None:
    # warnings.warn only reports the first occurrence per call site, so log each one here
    for asset in assets:
        if asset.metadata.id == MISSING_ASSET_ID:
            logger.warning("Asset URL has no id segment", url=asset.url)


class NormalizationService:
    """Runs the models, entries and assets passes for one Kontent project."""

    def __init__(self, options: KontentOptions):
        self.options = options
        self.logger = get_logger(__name__).bind(
            project_id=options.project_id, project_environment=options.project_environment
        )

    @with_operation_context("normalize_snapshot")
    def normalize(self, types: Iterable[TypePayload], items: Iterable[ItemPayload]) -> NormalizationResult:
        """Normalize a full snapshot of content types and items.

        Invalid types and items are recorded as failures and skipped; everything
        else is normalized.
        """
        failures: list[NormalizationFailure] = []

        models = self._normalize_models(types, failures)
        index = index_models(models)

        entries: list[NormalizedEntry] = []
        assets: list[NormalizedAsset] = []
        items = list(items)

        self.logger.info("Normalizing items", item_count=len(items), model_count=len(models))

        for payload in items:
            try:
                item = KontentItem.model_validate(payload)
            except ValidationError as exc:
                self.logger.warning("Skipping unparseable item", error=str(exc))
                failures.append(_failure("parse", payload, exc))
                continue

            with with_item_context(item.system.codename, item.type_codename) as logger:
                try:
                    model = resolve_model(item, index)
                except NormalizationError as exc:
                    logger.warning("Skipping item without a unique model", error=str(exc))
                    failures.append(_failure("resolve", item, exc))
                    continue

                raw_item = payload if isinstance(payload, Mapping) else None
                entry = self._run_stage(
                    "entry", item, failures, logger, normalize_entry, item, model, self.options, raw_item
                )
                if entry is not None:
                    entries.append(entry)

                item_assets = self._run_stage("asset", item, failures, logger, normalize_assets_for_item, item, model)
                if item_assets is not None:
                    _log_malformed_asset_urls(logger, item_assets)
                    assets.extend(item_assets)

        self.logger.info(
            "Normalization complete",
            models=len(models),
            entries=len(entries),
            assets=len(assets),
            failures=len(failures),
        )

        return NormalizationResult(models=models, entries=entries, assets=assets, failures=failures)

    def _normalize_models(
        self, types: Iterable[TypePayload], failures: list[NormalizationFailure]
    ) -> list[NormalizedModel]:
        models: list[NormalizedModel] = []
        for payload in types:
            try:
                content_type = KontentType.model_validate(payload)
                models.append(normalize_model(content_type, self.options))
            except RECOVERABLE_ERRORS as exc:
                self.logger.warning("Skipping invalid content type", error=str(exc))
                failures.append(_failure("model", payload, exc))
        return models

    @staticmethod
    def _run_stage(stage, item, failures, logger, func, *args):
        try:
            return func(*args)
        except RECOVERABLE_ERRORS as exc:
            logger.warning(f"Failed {stage} normalization", error=str(exc), error_type=type(exc).__name__)
            failures.append(_failure(stage, item, exc))
            return None


def normalize(
    types: Iterable[TypePayload], items: Iterable[ItemPayload], options: KontentOptions
) -> NormalizationResult:
    """Normalize a Kontent snapshot with the given options."""
    return NormalizationService(options).normalize(types, items)
