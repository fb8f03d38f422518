# ABOUTME: Tests for the Kontent wire shape models
# ABOUTME: Both REST dict-keyed payloads and SDK array payloads must parse

import pytest
from conftest import IMAGE_URL, make_item, make_type, rich_text

from kontent_normalizer.errors import ElementValueError
from kontent_normalizer.kontent.types import ElementType, KontentItem, KontentItemElement, KontentType


class TestKontentType:
    def test_dict_elements_keep_order_and_codename(self):
        content_type = KontentType.model_validate(make_type("post", "Post", ["title", "tags", "body"]))

        assert [element.codename for element in content_type.elements] == ["title", "tags", "body"]
        assert content_type.codename == "post"

    def test_list_elements(self):
        content_type = KontentType.model_validate(
            {
                "system": {"name": "Post", "codename": "post"},
                "elements": [{"codename": "title", "type": "text"}, {"codename": "body", "type": "rich_text"}],
            }
        )

        assert [element.codename for element in content_type.elements] == ["title", "body"]

    def test_unknown_fields_are_tolerated(self):
        payload = make_type("post", "Post", [])
        payload["system"]["collection"] = "default"

        assert KontentType.model_validate(payload).system.name == "Post"


class TestKontentItemElement:
    def test_images_mapping_becomes_list(self):
        element = KontentItemElement.model_validate(rich_text(IMAGE_URL))

        assert [image.url for image in element.images] == [IMAGE_URL]
        assert element.images[0].image_id == "image-0"

    def test_null_images(self):
        assert KontentItemElement.model_validate({"type": "rich_text", "images": None}).images == []

    def test_element_type(self):
        assert KontentItemElement.model_validate({"type": "asset"}).element_type is ElementType.ASSET
        assert KontentItemElement.model_validate({"type": "mystery"}).element_type is None


class TestKontentItem:
    def test_type_codename(self):
        item = KontentItem.model_validate(make_item("hello", "post", {}))

        assert item.type_codename == "post"
        assert item.system.last_modified == "2024-03-01T10:15:00.000Z"


class TestElementValueShape:
    def test_scalar_asset_value_is_rejected(self):
        element = KontentItemElement.model_validate({"type": "asset", "value": 5})

        with pytest.raises(ElementValueError, match="must be a list, got int"):
            element.asset_values()

    def test_mapping_choice_value_is_rejected(self):
        element = KontentItemElement.model_validate({"type": "multiple_choice", "value": {"name": "Red"}})

        with pytest.raises(ElementValueError):
            element.selected_options()

    def test_null_value_is_empty(self):
        element = KontentItemElement.model_validate({"type": "asset", "value": None})

        assert element.asset_values() == []
