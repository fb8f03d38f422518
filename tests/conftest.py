# ABOUTME: Shared fixtures with Kontent Delivery API shaped payloads
# ABOUTME: Types and items follow the REST wire format (dict-keyed elements and images)

import pytest

from kontent_normalizer.core.models import KontentOptions

PROJECT_ID = "975bf280-fd91-488c-994c-2f04416e5ee3"
LAST_MODIFIED = "2024-03-01T10:15:00.000Z"
IMAGE_URL = f"https://assets-us-01.kc-usercontent.com/{PROJECT_ID}/ID1/photo.jpg"
COVER_URL = f"https://assets-us-01.kc-usercontent.com/{PROJECT_ID}/ABCD/cover.png"


def make_type(codename: str, name: str, element_codenames: list[str]) -> dict:
    return {
        "system": {"id": f"type-{codename}", "name": name, "codename": codename, "last_modified": LAST_MODIFIED},
        "elements": {element: {"type": "text", "name": element.title()} for element in element_codenames},
    }


def make_item(codename: str, type_codename: str, elements: dict, item_id: str | None = None) -> dict:
    return {
        "system": {
            "id": item_id or f"id-{codename}",
            "name": codename.replace("_", " ").title(),
            "codename": codename,
            "language": "en-US",
            "type": type_codename,
            "collection": "default",
            "sitemap_locations": [],
            "last_modified": LAST_MODIFIED,
            "workflow_step": "published",
        },
        "elements": elements,
    }


def text(value) -> dict:
    return {"type": "text", "name": "Text", "value": value}


def multiple_choice(*names: str | None) -> dict:
    if names == (None,):
        return {"type": "multiple_choice", "name": "Choice", "value": None}
    return {
        "type": "multiple_choice",
        "name": "Choice",
        "value": [{"name": name, "codename": name.lower()} for name in names],
    }


def asset(*urls: str) -> dict:
    return {
        "type": "asset",
        "name": "Asset",
        "value": [
            {
                "name": url.rsplit("/", 1)[-1],
                "type": "image/png",
                "size": 1024,
                "description": None,
                "url": url,
            }
            for url in urls
        ],
    }


def rich_text(*image_urls: str) -> dict:
    images = {
        f"image-{index}": {
            "image_id": f"image-{index}",
            "description": None,
            "url": url,
            "width": 640,
            "height": 480,
        }
        for index, url in enumerate(image_urls)
    }
    return {
        "type": "rich_text",
        "name": "Body",
        "value": "<p>Hello</p>",
        "images": images,
        "links": {},
        "modular_content": [],
    }


@pytest.fixture
def options() -> KontentOptions:
    return KontentOptions(project_id=PROJECT_ID, language_codenames=["en-US"])


@pytest.fixture
def post_type() -> dict:
    return make_type("post", "Post", ["title", "tags", "body"])


@pytest.fixture
def post_item() -> dict:
    return make_item(
        "hello_world",
        "post",
        {
            "title": text("Hi"),
            "tags": multiple_choice("A"),
            "body": rich_text(IMAGE_URL),
        },
    )
