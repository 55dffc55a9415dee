"""Domain exceptions raised by the service and data layers."""


class ProductApiError(Exception):
    """Base class for product catalog errors."""

    pass


class InvalidArgumentError(ProductApiError):
    """Raised when a business rule rejects the supplied values."""

    pass


class ProductNotFoundError(ProductApiError):
    """Raised when a product does not exist."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found")


class StoreUnavailableError(ProductApiError):
    """Raised when the data store rejects a request or cannot be reached."""

    pass
