"""Endpoint catalog exceptions."""


class CatalogError(Exception):
    """Base class for endpoint catalog errors."""


class UnknownEndpointError(CatalogError):
    """Requested endpoint id is not in the catalog."""


class MissingParameterError(CatalogError):
    """Required endpoint parameters were not supplied."""

    def __init__(self, endpoint_id: str, missing: list[str]) -> None:
        self.endpoint_id = endpoint_id
        self.missing = list(missing)
        super().__init__(
            f"Missing required parameters for {endpoint_id}: {', '.join(self.missing)}"
        )
