# ABOUTME: Pydantic models for the Kontent Delivery API type and item payloads
# ABOUTME: Accepts both the REST dict-keyed shapes and the SDK array shapes

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kontent_normalizer.errors import ElementValueError


class ElementType(str, Enum):
    """Element types exposed by the Kontent Delivery API."""

    TEXT = "text"
    RICH_TEXT = "rich_text"
    NUMBER = "number"
    MULTIPLE_CHOICE = "multiple_choice"
    DATE_TIME = "date_time"
    ASSET = "asset"
    MODULAR_CONTENT = "modular_content"
    TAXONOMY = "taxonomy"
    URL_SLUG = "url_slug"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: str) -> "ElementType | None":
        """Return the matching member, or None for types this package does not know."""
        try:
            return cls(value)
        except ValueError:
            return None


class _KontentModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class AssetValue(_KontentModel):
    """One asset reference inside an asset element's value list."""

    name: str = ""
    type: str = ""
    size: int | None = None
    description: str | None = None
    url: str = ""


class MultipleChoiceOption(_KontentModel):
    """One selected option of a multiple choice element."""

    name: str
    codename: str = ""


class RichTextImage(_KontentModel):
    """Image embedded in a rich text element."""

    image_id: str = ""
    url: str
    description: str | None = None
    width: int | None = None
    height: int | None = None


class KontentTypeElement(_KontentModel):
    codename: str
    name: str = ""
    type: str = ""


class KontentTypeSystem(_KontentModel):
    id: str = ""
    name: str
    codename: str
    last_modified: str | None = None


class KontentType(_KontentModel):
    """A content type schema. Element order is the declaration order."""

    system: KontentTypeSystem
    elements: list[KontentTypeElement] = Field(default_factory=list)

    @field_validator("elements", mode="before")
    @classmethod
    def _elements_from_mapping(cls, value: Any) -> Any:
        # REST payloads key type elements by codename
        if isinstance(value, dict):
            return [{**element, "codename": codename} for codename, element in value.items()]
        return value

    @property
    def codename(self) -> str:
        return self.system.codename


class KontentItemElement(_KontentModel):
    """A typed element slot of a content item.

    `value` is kept as the raw payload; its shape depends on `type` and is
    interpreted by the value projector.
    """

    type: str
    name: str = ""
    value: Any = None
    images: list[RichTextImage] = Field(default_factory=list)
    links: dict[str, Any] = Field(default_factory=dict)
    modular_content: list[str] = Field(default_factory=list)

    @field_validator("images", mode="before")
    @classmethod
    def _images_from_mapping(cls, value: Any) -> Any:
        # REST payloads key rich text images by image id
        if value is None:
            return []
        if isinstance(value, dict):
            return [{"image_id": image_id, **image} for image_id, image in value.items()]
        return value

    @property
    def element_type(self) -> ElementType | None:
        return ElementType.parse(self.type)

    def _value_list(self) -> list:
        if self.value is None:
            return []
        if not isinstance(self.value, list):
            raise ElementValueError(f"{self.type} element value must be a list, got {type(self.value).__name__}")
        return self.value

    def asset_values(self) -> list[AssetValue]:
        """Parse the raw value as a list of asset references.

        Raises:
            ElementValueError: If the value is neither null nor a list
        """
        return [AssetValue.model_validate(asset) for asset in self._value_list()]

    def selected_options(self) -> list[MultipleChoiceOption]:
        """Parse the raw value as a list of selected options.

        Raises:
            ElementValueError: If the value is neither null nor a list
        """
        return [MultipleChoiceOption.model_validate(option) for option in self._value_list()]


class KontentItemSystem(_KontentModel):
    id: str = ""
    name: str = ""
    codename: str
    language: str = ""
    type: str
    collection: str | None = None
    last_modified: str
    workflow_step: str | None = None


class KontentItem(_KontentModel):
    """A content item with its elements keyed by element codename."""

    system: KontentItemSystem
    elements: dict[str, KontentItemElement] = Field(default_factory=dict)

    @property
    def type_codename(self) -> str:
        return self.system.type
