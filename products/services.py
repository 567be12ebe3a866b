"""
Product catalog service.

Implements the five catalog operations (list, get, create, update, delete)
over a product store. Every operation is one request-sized unit of work; the
service holds no state between calls.
"""

import logging

from .exceptions import (
    ConcurrencyConflict,
    ProductIdMismatch,
    ProductNotFound,
    UnknownReference,
)
from .store import ProductStore

logger = logging.getLogger(__name__)


class ProductService:
    """
    CRUD operations on products.

    Errors are raised as catalog exceptions; translating them to HTTP
    status codes is left to the caller.
    """

    def __init__(self, store=None):
        self.store = store or ProductStore()

    def list_products(self):
        """Return every product with its category and supplier loaded"""
        return self.store.list()

    def get_product(self, product_id):
        """
        Return one product with category, supplier and order details.

        Raises ProductNotFound when the id does not resolve.
        """
        product = self.store.get(product_id, related=True)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    def create_product(self, product_name, category_id, supplier_id):
        """
        Create a product linked to the given category and supplier.

        A category or supplier id that does not resolve gets a placeholder
        row holding only that id. Only the name is copied onto the new
        product; everything else keeps its column default.
        """
        with self.store.atomic():
            category = self.store.find_category(category_id)
            if category is None:
                logger.warning(
                    "Category %s does not exist, creating placeholder", category_id
                )
                category = self.store.add_category(category_id)

            supplier = self.store.find_supplier(supplier_id)
            if supplier is None:
                logger.warning(
                    "Supplier %s does not exist, creating placeholder", supplier_id
                )
                supplier = self.store.add_supplier(supplier_id)

            product = self.store.create(
                product_name=product_name,
                category=category,
                supplier=supplier,
            )

        logger.info("Created product %s (%s)", product.pk, product.product_name)
        return product

    def update_product(self, product_id, payload_id, changes):
        """
        Overwrite a product's fields with ``changes``.

        Raises ProductIdMismatch when ``payload_id`` differs from
        ``product_id`` and ProductNotFound when the product is absent.
        Category and supplier ids in ``changes`` are resolved after that and
        raise UnknownReference when they do not exist.
        A concurrency conflict is re-checked once: if the row is gone the
        result is ProductNotFound, otherwise the conflict propagates.
        """
        if payload_id != product_id:
            raise ProductIdMismatch(product_id, payload_id)

        product = self.store.get(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        self._check_references(changes)

        try:
            product = self.store.update(product, changes)
        except ConcurrencyConflict:
            self._recheck(product_id)
            raise

        logger.info("Updated product %s (%s)", product_id, ', '.join(sorted(changes)))
        return product

    def delete_product(self, product_id):
        """
        Delete a product and every order detail referencing it.

        Same NotFound and conflict handling as update_product.
        """
        product = self.store.get(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        try:
            details_deleted = self.store.delete(product)
        except ConcurrencyConflict:
            self._recheck(product_id)
            raise

        logger.info(
            "Deleted product %s with %s order detail(s)", product_id, details_deleted
        )
        return details_deleted

    def _check_references(self, changes):
        """Unlike create, update never adds placeholder rows"""
        if 'category_id' in changes and self.store.find_category(changes['category_id']) is None:
            raise UnknownReference('category_id', changes['category_id'])
        if 'supplier_id' in changes and self.store.find_supplier(changes['supplier_id']) is None:
            raise UnknownReference('supplier_id', changes['supplier_id'])

    def _recheck(self, product_id):
        """Turn a conflict on a vanished row into ProductNotFound"""
        if not self.store.exists(product_id):
            logger.warning("Product %s disappeared during write", product_id)
            raise ProductNotFound(product_id)
        logger.error("Concurrency conflict on product %s", product_id)
