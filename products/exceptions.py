"""
Catalog Exception Classes

Raised by the product service and translated to HTTP responses by the
product viewset.
"""


class CatalogError(Exception):
    """Base exception for product catalog errors"""
    pass


class ProductNotFound(CatalogError):
    """
    Raised when a product id does not resolve to a stored row.

    Mapped to HTTP 404.
    """

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class ProductIdMismatch(CatalogError):
    """
    Raised when an update payload names a different product than the URL.

    Mapped to HTTP 400. Nothing is written when this is raised.
    """

    def __init__(self, path_id, payload_id):
        self.path_id = path_id
        self.payload_id = payload_id
        super().__init__(
            f"Product id in body ({payload_id}) does not match id in path ({path_id})"
        )


class UnknownReference(CatalogError):
    """
    Raised when an update points a product at a category or supplier
    that does not exist.

    ``field`` is the product column holding the reference. Mapped to HTTP 400.
    """

    def __init__(self, field, reference_id):
        self.field = field
        self.reference_id = reference_id
        super().__init__(f'Invalid pk "{reference_id}" - object does not exist.')


class ConcurrencyConflict(CatalogError):
    """
    Raised when a conditional write affected no rows.

    The row changed or disappeared between read and write. The service
    re-checks existence once; if the row is still there the conflict
    propagates to the caller as a server error.
    """

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} was modified or removed concurrently")
