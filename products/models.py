from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator


class Category(models.Model):
    """
    Category model for organizing products.
    A category may exist with only its id populated (placeholder row).
    """
    category_name = models.CharField(
        max_length=15,
        blank=True,
        default='',
        help_text="Category name (empty for placeholder rows)"
    )
    description = models.TextField(
        blank=True,
        null=True,
        help_text="Optional category description"
    )

    class Meta:
        verbose_name = "Category"
        verbose_name_plural = "Categories"
        ordering = ['id']

    def __str__(self):
        return self.category_name or f"Category #{self.pk}"

    @property
    def is_placeholder(self):
        """Placeholder categories carry nothing but their id"""
        return not self.category_name and not self.description


class Supplier(models.Model):
    """
    Supplier model. Products reference exactly one supplier.
    """
    company_name = models.CharField(
        max_length=40,
        blank=True,
        default='',
        help_text="Supplier company name (empty for placeholder rows)"
    )
    contact_name = models.CharField(max_length=30, blank=True, null=True)
    contact_title = models.CharField(max_length=30, blank=True, null=True)
    city = models.CharField(max_length=15, blank=True, null=True)
    country = models.CharField(max_length=15, blank=True, null=True)
    phone = models.CharField(max_length=24, blank=True, null=True)

    class Meta:
        verbose_name = "Supplier"
        verbose_name_plural = "Suppliers"
        ordering = ['id']

    def __str__(self):
        return self.company_name or f"Supplier #{self.pk}"


class Product(models.Model):
    """
    Product model with Northwind pricing and inventory fields.

    ``row_version`` is bumped on every write and used for optimistic
    concurrency detection; it never leaves the API boundary.
    """
    product_name = models.CharField(
        max_length=40,
        help_text="Product name"
    )
    quantity_per_unit = models.CharField(
        max_length=20,
        blank=True,
        null=True,
        help_text="Packaging description, e.g. '10 boxes x 20 bags'"
    )
    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=4,
        blank=True,
        null=True,
        default=0,
        validators=[MinValueValidator(0)],
    )
    units_in_stock = models.SmallIntegerField(
        blank=True,
        null=True,
        default=0,
        validators=[MinValueValidator(0)],
    )
    units_on_order = models.SmallIntegerField(
        blank=True,
        null=True,
        default=0,
        validators=[MinValueValidator(0)],
    )
    reorder_level = models.SmallIntegerField(
        blank=True,
        null=True,
        default=0,
        validators=[MinValueValidator(0)],
    )
    discontinued = models.BooleanField(default=False)

    # Relationships
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name='products',
        help_text="Product category"
    )
    supplier = models.ForeignKey(
        Supplier,
        on_delete=models.PROTECT,
        related_name='products',
        help_text="Product supplier"
    )

    row_version = models.PositiveIntegerField(default=0, editable=False)

    class Meta:
        verbose_name = "Product"
        verbose_name_plural = "Products"
        ordering = ['id']
        indexes = [
            models.Index(fields=['product_name'], name='product_name_idx'),
        ]

    def __str__(self):
        return self.product_name


class Order(models.Model):
    """
    Customer order. Only the columns order details need are modelled.
    """
    customer_id = models.CharField(max_length=5, blank=True, null=True)
    order_date = models.DateTimeField(blank=True, null=True)
    ship_name = models.CharField(max_length=40, blank=True, null=True)
    freight = models.DecimalField(
        max_digits=10,
        decimal_places=4,
        blank=True,
        null=True,
        default=0
    )

    class Meta:
        verbose_name = "Order"
        verbose_name_plural = "Orders"
        ordering = ['id']

    def __str__(self):
        return f"Order #{self.pk}"


class OrderDetail(models.Model):
    """
    Order line referencing a product.

    The product reference is protected: a product row cannot be deleted while
    order details still point at it, so deleting a product has to remove its
    details first.
    """
    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='orderdetails'
    )
    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name='orderdetails'
    )
    unit_price = models.DecimalField(max_digits=10, decimal_places=4, default=0)
    quantity = models.SmallIntegerField(default=1, validators=[MinValueValidator(1)])
    discount = models.FloatField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(1)]
    )

    class Meta:
        verbose_name = "Order Detail"
        verbose_name_plural = "Order Details"
        ordering = ['order_id', 'product_id']
        unique_together = ['order', 'product']

    def __str__(self):
        return f"{self.order} - {self.product} x{self.quantity}"
