# ABOUTME: Positional parsing helpers for Kontent asset CDN URLs
# ABOUTME: Recovers asset id, file name and a synthesized image content type

import warnings

from kontent_normalizer.errors import MalformedAssetUrlWarning

# https://assets-us-01.kc-usercontent.com/<project-id>/<asset-id>/<file-name>
ASSET_ID_SEGMENT = 4

MISSING_ASSET_ID = ""


def asset_name_from_url(asset_url: str) -> str:
    """Return everything after the last '/' (the whole URL if there is none)."""
    return asset_url[asset_url.rfind("/") + 1 :]


def asset_extension_from_url(asset_url: str) -> str:
    """Return everything after the last '.' (the whole URL if there is none)."""
    return asset_url[asset_url.rfind(".") + 1 :]


def image_mime_type_from_url(asset_url: str) -> str:
    r"""Synthesize the content type for a rich text image.

    The separator is a backslash (``image\png``), which is what downstream
    consumers currently receive for embedded images.
    """
    return f"image\\{asset_extension_from_url(asset_url)}"


def asset_id_from_url(asset_url: str) -> str:
    """Return the fifth '/'-delimited segment of the URL.

    URLs with fewer segments yield MISSING_ASSET_ID and a MalformedAssetUrlWarning.
    Under the default warnings filter only the first warning per call site is
    shown; the batch service logs every affected URL itself.
    """
    segments = asset_url.split("/")
    if len(segments) <= ASSET_ID_SEGMENT:
        warnings.warn(
            MalformedAssetUrlWarning(f"Asset URL has no id segment: {asset_url!r}"),
            stacklevel=2,
        )
        return MISSING_ASSET_ID
    return segments[ASSET_ID_SEGMENT]
