"""
Product store backed by the Django ORM.

The product service only talks to this object, so tests can hand the service
any object with the same methods.
"""

import logging

from django.core.management.color import no_style
from django.db import connection, transaction
from django.db.models import F

from .exceptions import ConcurrencyConflict
from .models import Category, OrderDetail, Product, Supplier

logger = logging.getLogger(__name__)


def reset_id_sequences(*models):
    """
    Move the id sequences of ``models`` past their highest stored id.

    Rows inserted with explicit ids leave PostgreSQL sequences behind, so the
    next generated id would collide. A no-op on backends without sequences.
    """
    statements = connection.ops.sequence_reset_sql(no_style(), models)
    if not statements:
        return
    with connection.cursor() as cursor:
        for sql in statements:
            cursor.execute(sql)
    logger.debug("Reset id sequences for %s", ', '.join(m.__name__ for m in models))


class ProductStore:
    """
    Data access for products and the rows they reference.

    Writes to products are conditional on ``row_version`` so a stale write
    affects no rows and raises ConcurrencyConflict.
    """

    def atomic(self):
        """Unit of work spanning several store calls"""
        return transaction.atomic()

    def list(self):
        """All products with category and supplier joined, materialized"""
        return list(
            Product.objects.select_related('category', 'supplier').order_by('id')
        )

    def get(self, product_id, related=False):
        """
        Fetch a product or None.

        With ``related=True`` category, supplier and order details are
        loaded as well.
        """
        queryset = Product.objects.all()
        if related:
            queryset = queryset.select_related('category', 'supplier').prefetch_related(
                'orderdetails'
            )
        return queryset.filter(pk=product_id).first()

    def exists(self, product_id):
        return Product.objects.filter(pk=product_id).exists()

    def find_category(self, category_id):
        return Category.objects.filter(pk=category_id).first()

    def add_category(self, category_id):
        """Insert a placeholder category holding only its id"""
        category = Category.objects.create(pk=category_id)
        reset_id_sequences(Category)
        return category

    def find_supplier(self, supplier_id):
        return Supplier.objects.filter(pk=supplier_id).first()

    def add_supplier(self, supplier_id):
        """Insert a placeholder supplier holding only its id"""
        supplier = Supplier.objects.create(pk=supplier_id)
        reset_id_sequences(Supplier)
        return supplier

    def create(self, **fields):
        return Product.objects.create(**fields)

    def update(self, product, changes):
        """
        Copy ``changes`` onto ``product`` and persist them.

        Raises ConcurrencyConflict when the stored row_version no longer
        matches the one read with ``product``.
        """
        for field, value in changes.items():
            setattr(product, field, value)

        updated = Product.objects.filter(
            pk=product.pk,
            row_version=product.row_version,
        ).update(row_version=F('row_version') + 1, **changes)

        if not updated:
            raise ConcurrencyConflict(product.pk)

        product.row_version += 1
        return product

    def delete(self, product):
        """
        Delete the product's order details, then the product, atomically.

        Returns the number of order details removed.
        """
        with transaction.atomic():
            details_deleted, _ = OrderDetail.objects.filter(product_id=product.pk).delete()
            _, deleted = Product.objects.filter(
                pk=product.pk,
                row_version=product.row_version,
            ).delete()

            if not deleted.get(Product._meta.label):
                # Rolls back the order detail delete as well
                raise ConcurrencyConflict(product.pk)

        logger.debug(
            "Deleted product %s and %s order detail(s)", product.pk, details_deleted
        )
        return details_deleted
