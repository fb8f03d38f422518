# ABOUTME: Generic output models for normalized Kontent content and run options
# ABOUTME: Models, entries and assets serialize to the host pipeline's camelCase records

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from kontent_normalizer.errors import NormalizationBatchError

SOURCE_NAME = "kontent-normalizer"

ASSET_MODEL_NAME = "__asset"
ASSET_MODEL_LABEL = "Assets"

METADATA_KEY = "__metadata"
KONTENT_METADATA_KEY = "kontent_metadata"


class KontentOptions(BaseModel):
    """Connection context threaded read-only through every mapping call."""

    model_config = ConfigDict(frozen=True)

    project_id: str = Field(description="Kontent project id")
    language_codenames: list[str] = Field(min_length=1, description="Languages fetched for the run")
    include_kontent_metadata: bool = Field(
        default=False, description="Attach the raw source item to each normalized entry"
    )
    project_environment: str = Field(default="master", description="Deployment stage stamped on every record")


class NormalizedModel(BaseModel):
    """Generic descriptor of one content type."""

    model_config = ConfigDict(frozen=True)

    source: str = SOURCE_NAME
    name: str = Field(serialization_alias="modelName")
    label: str = Field(serialization_alias="modelLabel")
    project_id: str = Field(serialization_alias="projectId")
    project_environment: str = Field(serialization_alias="projectEnvironment")
    field_names: list[str] = Field(default_factory=list, serialization_alias="fieldNames")

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class EntryMetadata(BaseModel):
    """Identity and provenance envelope shared by entries and assets."""

    # "model_" is a protected pydantic namespace
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    id: str
    source: str = SOURCE_NAME
    model_name: str = Field(serialization_alias="modelName")
    model_label: str = Field(serialization_alias="modelLabel")
    project_id: str = Field(serialization_alias="projectId")
    project_environment: str = Field(serialization_alias="projectEnvironment")
    # Kontent only exposes last_modified, so both timestamps carry it
    created_at: str = Field(serialization_alias="createdAt")
    updated_at: str = Field(serialization_alias="updatedAt")


class NormalizedEntry(BaseModel):
    """Generic representation of one content item."""

    fields: dict[str, Any] = Field(default_factory=dict)
    metadata: EntryMetadata
    kontent_metadata: dict[str, Any] | None = Field(
        default=None, description="Raw source item, set only when requested in the options"
    )

    def to_record(self) -> dict[str, Any]:
        """Flatten into the host record: fields, optional raw item, then metadata."""
        record: dict[str, Any] = dict(self.fields)
        if self.kontent_metadata is not None:
            record[KONTENT_METADATA_KEY] = self.kontent_metadata
        record[METADATA_KEY] = self.metadata.model_dump(by_alias=True)
        return record


class NormalizedAsset(BaseModel):
    """Generic representation of one media reference."""

    model_config = ConfigDict(frozen=True)

    title: str
    content_type: str = Field(serialization_alias="contentType")
    file_name: str = Field(serialization_alias="fileName")
    url: str
    metadata: EntryMetadata = Field(serialization_alias=METADATA_KEY)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class NormalizationFailure(BaseModel):
    """One item (or type) that could not be normalized."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    stage: Literal["model", "parse", "resolve", "entry", "asset"]
    item_id: str = ""
    item_codename: str = ""
    type_codename: str = ""
    error: str
    error_type: str
    exception: Exception | None = Field(default=None, exclude=True, repr=False)


class NormalizationResult(BaseModel):
    """Output of one batch run: the three entity lists plus collected failures."""

    models: list[NormalizedModel] = Field(default_factory=list)
    entries: list[NormalizedEntry] = Field(default_factory=list)
    assets: list[NormalizedAsset] = Field(default_factory=list)
    failures: list[NormalizationFailure] = Field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def raise_for_failures(self) -> None:
        """Raise NormalizationBatchError if any failure was collected."""
        if self.failures:
            raise NormalizationBatchError(self.failures)

    def to_record(self) -> dict[str, Any]:
        return {
            "models": [model.to_record() for model in self.models],
            "entries": [entry.to_record() for entry in self.entries],
            "assets": [asset.to_record() for asset in self.assets],
            "failures": [failure.model_dump() for failure in self.failures],
        }
