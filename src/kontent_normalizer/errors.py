# ABOUTME: Error and warning types raised while normalizing Kontent content
# ABOUTME: The batch service collects these per item instead of aborting the run


class NormalizationError(Exception):
    """Base class for errors raised while normalizing Kontent content."""

    pass


class ModelResolutionError(NormalizationError):
    """Raised when an item's type codename does not match exactly one model."""

    def __init__(self, item_id: str, item_codename: str, type_codename: str, match_count: int):
        self.item_id = item_id
        self.item_codename = item_codename
        self.type_codename = type_codename
        self.match_count = match_count

        if match_count == 0:
            reason = "no model matches"
        else:
            reason = f"{match_count} models match"
        super().__init__(
            f"Cannot resolve model for item '{item_codename}' (id={item_id}): "
            f"{reason} type codename '{type_codename}'"
        )


class ElementValueError(NormalizationError):
    """Raised when an element value does not have the shape its type requires."""

    pass


class MalformedAssetUrlWarning(UserWarning):
    """Asset URL has too few path segments to carry an asset id."""

    pass


class NormalizationBatchError(NormalizationError):
    """Raised on request when a batch run collected per-item failures."""

    def __init__(self, failures: list):
        self.failures = failures
        first = failures[0]
        super().__init__(
            f"{len(failures)} item(s) failed to normalize; first: [{first.stage}] {first.item_codename}: {first.error}"
        )
