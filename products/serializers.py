from rest_framework import serializers
from .models import Category, OrderDetail, Product, Supplier


# Column ranges: BigAutoField ids and SmallIntegerField stock counts
MAX_ID = 9223372036854775807
MAX_SMALLINT = 32767


class CategorySummarySerializer(serializers.Serializer):
    """
    Category as it appears nested in product summaries.
    On input only the id is required.
    """
    categoryId = serializers.IntegerField(source='id', min_value=1, max_value=MAX_ID)
    categoryName = serializers.CharField(
        source='category_name',
        required=False,
        allow_blank=True,
        max_length=15
    )


class SupplierSummarySerializer(serializers.Serializer):
    """
    Supplier as it appears nested in product summaries.
    On input only the id is required.
    """
    supplierId = serializers.IntegerField(source='id', min_value=1, max_value=MAX_ID)
    companyName = serializers.CharField(
        source='company_name',
        required=False,
        allow_blank=True,
        max_length=40
    )


class ProductSerializer(serializers.Serializer):
    """
    Product summary used by the list endpoint and the create request/response.

    The create operation only reads productName, category.categoryId and
    supplier.supplierId from the request; the remaining fields are accepted
    and validated but not stored.
    """
    productId = serializers.IntegerField(source='id', read_only=True)
    productName = serializers.CharField(source='product_name', max_length=40)
    quantityPerUnit = serializers.CharField(
        source='quantity_per_unit',
        max_length=20,
        required=False,
        allow_null=True,
        allow_blank=True
    )
    unitPrice = serializers.DecimalField(
        source='unit_price',
        max_digits=10,
        decimal_places=4,
        min_value=0,
        required=False,
        allow_null=True
    )
    unitsInStock = serializers.IntegerField(
        source='units_in_stock', min_value=0, max_value=MAX_SMALLINT,
        required=False, allow_null=True
    )
    unitsOnOrder = serializers.IntegerField(
        source='units_on_order', min_value=0, max_value=MAX_SMALLINT,
        required=False, allow_null=True
    )
    reorderLevel = serializers.IntegerField(
        source='reorder_level', min_value=0, max_value=MAX_SMALLINT,
        required=False, allow_null=True
    )
    discontinued = serializers.BooleanField(required=False)
    category = CategorySummarySerializer()
    supplier = SupplierSummarySerializer()


class CategorySerializer(serializers.ModelSerializer):
    categoryId = serializers.IntegerField(source='id', read_only=True)
    categoryName = serializers.CharField(source='category_name', read_only=True)

    class Meta:
        model = Category
        fields = ['categoryId', 'categoryName', 'description']
        read_only_fields = fields


class SupplierSerializer(serializers.ModelSerializer):
    supplierId = serializers.IntegerField(source='id', read_only=True)
    companyName = serializers.CharField(source='company_name', read_only=True)
    contactName = serializers.CharField(source='contact_name', read_only=True)
    contactTitle = serializers.CharField(source='contact_title', read_only=True)

    class Meta:
        model = Supplier
        fields = [
            'supplierId', 'companyName', 'contactName', 'contactTitle',
            'city', 'country', 'phone'
        ]
        read_only_fields = fields


class OrderDetailSerializer(serializers.ModelSerializer):
    orderId = serializers.IntegerField(source='order_id', read_only=True)
    productId = serializers.IntegerField(source='product_id', read_only=True)
    unitPrice = serializers.DecimalField(
        source='unit_price', max_digits=10, decimal_places=4, read_only=True
    )

    class Meta:
        model = OrderDetail
        fields = ['orderId', 'productId', 'unitPrice', 'quantity', 'discount']
        read_only_fields = fields


class ProductDetailSerializer(serializers.ModelSerializer):
    """
    Full product record for the retrieve endpoint.
    Includes the referenced category, supplier and all order lines.
    """
    productId = serializers.IntegerField(source='id', read_only=True)
    productName = serializers.CharField(source='product_name', read_only=True)
    supplierId = serializers.IntegerField(source='supplier_id', read_only=True)
    categoryId = serializers.IntegerField(source='category_id', read_only=True)
    quantityPerUnit = serializers.CharField(source='quantity_per_unit', read_only=True)
    unitPrice = serializers.DecimalField(
        source='unit_price', max_digits=10, decimal_places=4, read_only=True
    )
    unitsInStock = serializers.IntegerField(source='units_in_stock', read_only=True)
    unitsOnOrder = serializers.IntegerField(source='units_on_order', read_only=True)
    reorderLevel = serializers.IntegerField(source='reorder_level', read_only=True)
    category = CategorySerializer(read_only=True)
    supplier = SupplierSerializer(read_only=True)
    orderdetails = OrderDetailSerializer(many=True, read_only=True)

    class Meta:
        model = Product
        fields = [
            'productId', 'productName', 'supplierId', 'categoryId',
            'quantityPerUnit', 'unitPrice', 'unitsInStock', 'unitsOnOrder',
            'reorderLevel', 'discontinued', 'category', 'supplier',
            'orderdetails'
        ]
        read_only_fields = fields


class ProductUpdateSerializer(serializers.Serializer):
    """
    Update payload for PUT /products/{id}.

    Flat shape: category and supplier are referenced by id and must already
    exist. The ids are resolved by the service once the product itself is
    known to exist. Fields left out of the payload keep their stored value.
    """
    productId = serializers.IntegerField(source='id', max_value=MAX_ID)
    productName = serializers.CharField(source='product_name', max_length=40)
    supplierId = serializers.IntegerField(
        source='supplier_id', min_value=1, max_value=MAX_ID, required=False
    )
    categoryId = serializers.IntegerField(
        source='category_id', min_value=1, max_value=MAX_ID, required=False
    )
    quantityPerUnit = serializers.CharField(
        source='quantity_per_unit',
        max_length=20,
        required=False,
        allow_null=True,
        allow_blank=True
    )
    unitPrice = serializers.DecimalField(
        source='unit_price',
        max_digits=10,
        decimal_places=4,
        min_value=0,
        required=False,
        allow_null=True
    )
    unitsInStock = serializers.IntegerField(
        source='units_in_stock', min_value=0, max_value=MAX_SMALLINT,
        required=False, allow_null=True
    )
    unitsOnOrder = serializers.IntegerField(
        source='units_on_order', min_value=0, max_value=MAX_SMALLINT,
        required=False, allow_null=True
    )
    reorderLevel = serializers.IntegerField(
        source='reorder_level', min_value=0, max_value=MAX_SMALLINT,
        required=False, allow_null=True
    )
    discontinued = serializers.BooleanField(required=False)

    def get_changes(self):
        """Validated fields to copy onto the stored product, keyed by model field"""
        changes = dict(self.validated_data)
        changes.pop('id', None)
        return changes
