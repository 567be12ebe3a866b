from decimal import Decimal
from unittest.mock import patch

from django.test import override_settings
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from products.exceptions import ConcurrencyConflict
from products.models import Category, Order, OrderDetail, Product, Supplier


class ProductAPITestBase(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.category = Category.objects.create(
            pk=1,
            category_name="Beverages",
            description="Soft drinks, coffees, teas, beers, and ales"
        )
        self.supplier = Supplier.objects.create(
            pk=1,
            company_name="Exotic Liquids",
            contact_name="Charlotte Cooper"
        )
        self.product = Product.objects.create(
            product_name="Chang",
            quantity_per_unit="24 - 12 oz bottles",
            unit_price=Decimal("19.00"),
            units_in_stock=17,
            units_on_order=40,
            reorder_level=25,
            category=self.category,
            supplier=self.supplier
        )


class ProductListAPITest(ProductAPITestBase):
    """Test cases for GET /products"""

    def test_list_products(self):
        """Test listing products with nested summaries"""
        response = self.client.get('/products')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

        item = response.data[0]
        self.assertEqual(item['productId'], self.product.pk)
        self.assertEqual(item['productName'], "Chang")
        self.assertEqual(item['unitsInStock'], 17)
        self.assertEqual(item['category'], {'categoryId': 1, 'categoryName': "Beverages"})
        self.assertEqual(item['supplier'], {'supplierId': 1, 'companyName': "Exotic Liquids"})

    def test_list_products_every_item_has_references(self):
        """Test no listed product lacks its category or supplier summary"""
        Product.objects.create(
            product_name="Chai",
            category=Category.objects.create(pk=9),
            supplier=self.supplier
        )
        response = self.client.get('/products')
        self.assertEqual(len(response.data), 2)
        for item in response.data:
            self.assertIsNotNone(item['category']['categoryId'])
            self.assertIsNotNone(item['supplier']['supplierId'])

    def test_list_products_empty(self):
        """Test an empty catalog lists as an empty array"""
        Product.objects.all().delete()
        response = self.client.get('/products')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    @override_settings(CATALOG_CONFIG={'PRESERVE_REFERENCES': True})
    def test_list_products_with_reference_wrapper(self):
        """Test the $values wrapper when reference preservation is on"""
        response = self.client.get('/products')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['$id'], '1')
        self.assertEqual(len(response.data['$values']), 1)
        self.assertEqual(response.data['$values'][0]['productName'], "Chang")


class ProductRetrieveAPITest(ProductAPITestBase):
    """Test cases for GET /products/{id}"""

    def test_retrieve_product(self):
        """Test retrieving a product with category, supplier and order details"""
        order = Order.objects.create(customer_id="VINET")
        OrderDetail.objects.create(
            order=order,
            product=self.product,
            unit_price=Decimal("19.00"),
            quantity=10
        )

        response = self.client.get(f'/products/{self.product.pk}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['productName'], "Chang")
        self.assertEqual(response.data['categoryId'], 1)
        self.assertEqual(response.data['supplierId'], 1)
        self.assertEqual(response.data['category']['categoryName'], "Beverages")
        self.assertEqual(response.data['supplier']['contactName'], "Charlotte Cooper")
        self.assertEqual(len(response.data['orderdetails']), 1)
        self.assertEqual(response.data['orderdetails'][0]['orderId'], order.pk)
        self.assertEqual(response.data['orderdetails'][0]['quantity'], 10)
        self.assertNotIn('rowVersion', response.data)

    def test_retrieve_missing_product(self):
        """Test retrieving an unknown id"""
        response = self.client.get('/products/999')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': 'Product not found'})

    def test_retrieve_non_integer_id(self):
        """Test a non-integer id does not match the route"""
        response = self.client.get('/products/abc')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class ProductCreateAPITest(ProductAPITestBase):
    """Test cases for POST /products"""

    def test_create_product_with_existing_references(self):
        """Test creating Chai against existing category and supplier 1"""
        data = {
            'productName': 'Chai',
            'category': {'categoryId': 1},
            'supplier': {'supplierId': 1}
        }
        response = self.client.post('/products', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['productName'], "Chai")
        self.assertEqual(response.data['category'], {'categoryId': 1, 'categoryName': "Beverages"})
        self.assertEqual(response.data['supplier'], {'supplierId': 1, 'companyName': "Exotic Liquids"})
        self.assertEqual(Category.objects.count(), 1)
        self.assertEqual(Supplier.objects.count(), 1)

        product_id = response.data['productId']
        self.assertTrue(response['Location'].endswith(f'/products/{product_id}'))

    def test_create_then_get_round_trip(self):
        """Test the Location target returns the submitted name and references"""
        data = {
            'productName': 'Ipoh Coffee',
            'category': {'categoryId': 1},
            'supplier': {'supplierId': 1}
        }
        created = self.client.post('/products', data, format='json')
        response = self.client.get(created['Location'])
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['productName'], "Ipoh Coffee")
        self.assertEqual(response.data['category']['categoryId'], 1)
        self.assertEqual(response.data['supplier']['supplierId'], 1)

    def test_create_with_unknown_category(self):
        """Test an unknown category id is created as a placeholder"""
        data = {
            'productName': 'Chai',
            'category': {'categoryId': 7},
            'supplier': {'supplierId': 1}
        }
        response = self.client.post('/products', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['category'], {'categoryId': 7, 'categoryName': ""})
        self.assertEqual(Category.objects.get(pk=7).category_name, "")
        self.assertEqual(
            Product.objects.get(pk=response.data['productId']).category_id, 7
        )

    def test_create_ignores_non_name_fields(self):
        """Test only productName is stored from the product fields"""
        data = {
            'productName': 'Chai',
            'unitPrice': 18,
            'unitsInStock': 39,
            'quantityPerUnit': '10 boxes x 20 bags',
            'category': {'categoryId': 1},
            'supplier': {'supplierId': 1}
        }
        response = self.client.post('/products', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        product = Product.objects.get(pk=response.data['productId'])
        self.assertEqual(product.units_in_stock, 0)
        self.assertIsNone(product.quantity_per_unit)

    def test_create_product_validation(self):
        """Test a payload without name or references is rejected"""
        response = self.client.post('/products', {'unitPrice': -1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('productName', response.data)
        self.assertIn('category', response.data)
        self.assertIn('supplier', response.data)
        self.assertEqual(Product.objects.count(), 1)


    def test_create_with_out_of_range_reference_id(self):
        """Test a category id beyond the id column range is rejected"""
        data = {
            'productName': 'Chai',
            'category': {'categoryId': 10 ** 25},
            'supplier': {'supplierId': 1}
        }
        response = self.client.post('/products', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('category', response.data)
        self.assertEqual(Category.objects.count(), 1)
        self.assertEqual(Product.objects.count(), 1)

    def test_create_with_out_of_range_stock(self):
        """Test stock counts must fit a smallint column"""
        data = {
            'productName': 'Chai',
            'unitsOnOrder': 40000,
            'category': {'categoryId': 1},
            'supplier': {'supplierId': 1}
        }
        response = self.client.post('/products', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('unitsOnOrder', response.data)
        self.assertEqual(Product.objects.count(), 1)


class ProductUpdateAPITest(ProductAPITestBase):
    """Test cases for PUT /products/{id}"""

    def payload(self, **overrides):
        data = {
            'productId': self.product.pk,
            'productName': 'Chang',
            'supplierId': 1,
            'categoryId': 1,
            'quantityPerUnit': '24 - 12 oz bottles',
            'unitPrice': 19,
            'unitsInStock': 17,
            'unitsOnOrder': 40,
            'reorderLevel': 25,
            'discontinued': False
        }
        data.update(overrides)
        return data

    def test_update_product(self):
        """Test a full update is stored and echoed"""
        data = self.payload(productName='Chang Lager', unitsInStock=60, discontinued=True)
        response = self.client.put(f'/products/{self.product.pk}', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['productId'], self.product.pk)
        self.assertEqual(response.data['productName'], "Chang Lager")
        self.assertEqual(response.data['unitsInStock'], 60)
        self.assertTrue(response.data['discontinued'])

        self.product.refresh_from_db()
        self.assertEqual(self.product.product_name, "Chang Lager")
        self.assertEqual(self.product.units_in_stock, 60)
        self.assertTrue(self.product.discontinued)

    def test_update_moves_product_to_other_category(self):
        """Test categoryId re-links the product"""
        Category.objects.create(pk=2, category_name="Condiments")
        response = self.client.put(
            f'/products/{self.product.pk}', self.payload(categoryId=2), format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['categoryId'], 2)
        self.product.refresh_from_db()
        self.assertEqual(self.product.category_id, 2)

    def test_update_id_mismatch(self):
        """Test mismatched path and body ids fail without mutation"""
        data = self.payload(productId=self.product.pk + 1, productName='Renamed')
        response = self.client.put(f'/products/{self.product.pk}', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('error', response.data)
        self.product.refresh_from_db()
        self.assertEqual(self.product.product_name, "Chang")

    def test_update_missing_product(self):
        """Test updating an unknown id"""
        data = self.payload(productId=999)
        response = self.client.put('/products/999', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_with_unknown_category(self):
        """Test an update cannot point at a category that does not exist"""
        response = self.client.put(
            f'/products/{self.product.pk}', self.payload(categoryId=77), format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('categoryId', response.data)
        self.assertFalse(Category.objects.filter(pk=77).exists())

    def test_update_missing_product_with_unknown_category(self):
        """Test a missing product is reported before its references"""
        data = self.payload(productId=999, categoryId=77)
        response = self.client.put('/products/999', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': 'Product not found'})

    def test_update_with_unknown_supplier(self):
        response = self.client.put(
            f'/products/{self.product.pk}', self.payload(supplierId=88), format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('supplierId', response.data)
        self.product.refresh_from_db()
        self.assertEqual(self.product.supplier_id, 1)
        self.assertEqual(self.product.row_version, 0)

    def test_update_with_out_of_range_stock(self):
        """Test stock counts beyond the smallint range are rejected"""
        response = self.client.put(
            f'/products/{self.product.pk}', self.payload(unitsInStock=40000), format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('unitsInStock', response.data)
        self.product.refresh_from_db()
        self.assertEqual(self.product.units_in_stock, 17)

    def test_update_conflict_on_existing_row_is_server_error(self):
        """Test an unresolved concurrency conflict surfaces as a 500"""
        client = APIClient(raise_request_exception=False)
        with patch(
            'products.store.ProductStore.update',
            side_effect=ConcurrencyConflict(self.product.pk)
        ):
            response = client.put(
                f'/products/{self.product.pk}', self.payload(), format='json'
            )
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    def test_update_conflict_on_vanished_row_is_not_found(self):
        """Test a conflict on a row deleted mid-request reports 404"""
        def vanish(product, changes):
            Product.objects.filter(pk=product.pk).delete()
            raise ConcurrencyConflict(product.pk)

        with patch('products.store.ProductStore.update', side_effect=vanish):
            response = self.client.put(
                f'/products/{self.product.pk}', self.payload(), format='json'
            )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class ProductDeleteAPITest(ProductAPITestBase):
    """Test cases for DELETE /products/{id}"""

    def test_delete_product(self):
        """Test deleting a product and its order details"""
        order = Order.objects.create(customer_id="VINET")
        OrderDetail.objects.create(order=order, product=self.product, quantity=10)

        response = self.client.delete(f'/products/{self.product.pk}')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(Product.objects.count(), 0)
        self.assertEqual(OrderDetail.objects.count(), 0)
        self.assertTrue(Order.objects.filter(pk=order.pk).exists())

        response = self.client.get(f'/products/{self.product.pk}')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_missing_product(self):
        """Test deleting product 999 changes nothing"""
        response = self.client.delete('/products/999')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Product.objects.count(), 1)


class CatalogPageTest(APITestCase):
    """Test cases for the catalog page"""

    def test_catalog_page(self):
        """Test the page renders the loading placeholder and the list URL"""
        response = self.client.get('/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertContains(response, 'Loading...')
        self.assertContains(response, '$values')
        self.assertContains(response, '/products')
