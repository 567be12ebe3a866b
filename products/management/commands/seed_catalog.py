from datetime import datetime, timezone
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from products.models import Category, Order, OrderDetail, Product, Supplier
from products.store import reset_id_sequences


CATEGORIES = [
    {'id': 1, 'category_name': 'Beverages', 'description': 'Soft drinks, coffees, teas, beers, and ales'},
    {'id': 2, 'category_name': 'Condiments', 'description': 'Sweet and savory sauces, relishes, spreads, and seasonings'},
    {'id': 3, 'category_name': 'Confections', 'description': 'Desserts, candies, and sweet breads'},
]

SUPPLIERS = [
    {'id': 1, 'company_name': 'Exotic Liquids', 'contact_name': 'Charlotte Cooper', 'city': 'London', 'country': 'UK'},
    {'id': 2, 'company_name': 'New Orleans Cajun Delights', 'contact_name': 'Shelley Burke', 'city': 'New Orleans', 'country': 'USA'},
    {'id': 3, 'company_name': "Grandma Kelly's Homestead", 'contact_name': 'Regina Murphy', 'city': 'Ann Arbor', 'country': 'USA'},
]

PRODUCTS = [
    {'id': 1, 'product_name': 'Chai', 'category_id': 1, 'supplier_id': 1,
     'quantity_per_unit': '10 boxes x 20 bags', 'unit_price': Decimal('18.00'),
     'units_in_stock': 39, 'units_on_order': 0, 'reorder_level': 10},
    {'id': 2, 'product_name': 'Chang', 'category_id': 1, 'supplier_id': 1,
     'quantity_per_unit': '24 - 12 oz bottles', 'unit_price': Decimal('19.00'),
     'units_in_stock': 17, 'units_on_order': 40, 'reorder_level': 25},
    {'id': 3, 'product_name': 'Aniseed Syrup', 'category_id': 2, 'supplier_id': 1,
     'quantity_per_unit': '12 - 550 ml bottles', 'unit_price': Decimal('10.00'),
     'units_in_stock': 13, 'units_on_order': 70, 'reorder_level': 25},
    {'id': 4, 'product_name': "Chef Anton's Cajun Seasoning", 'category_id': 2, 'supplier_id': 2,
     'quantity_per_unit': '48 - 6 oz jars', 'unit_price': Decimal('22.00'),
     'units_in_stock': 53, 'units_on_order': 0, 'reorder_level': 0},
    {'id': 5, 'product_name': "Grandma's Boysenberry Spread", 'category_id': 2, 'supplier_id': 3,
     'quantity_per_unit': '12 - 8 oz jars', 'unit_price': Decimal('25.00'),
     'units_in_stock': 120, 'units_on_order': 0, 'reorder_level': 25},
]


class Command(BaseCommand):
    help = 'Seeds the database with a slice of the Northwind catalog'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing catalog data before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write(self.style.WARNING('Clearing existing data...'))
            OrderDetail.objects.all().delete()
            Order.objects.all().delete()
            Product.objects.all().delete()
            Category.objects.all().delete()
            Supplier.objects.all().delete()
            self.stdout.write(self.style.SUCCESS('Data cleared!'))

        self.stdout.write(self.style.SUCCESS('Starting catalog seeding...'))

        for category_data in CATEGORIES:
            category, created = Category.objects.get_or_create(
                id=category_data['id'],
                defaults=category_data
            )
            if created:
                self.stdout.write(f'  Created category: {category}')

        for supplier_data in SUPPLIERS:
            supplier, created = Supplier.objects.get_or_create(
                id=supplier_data['id'],
                defaults=supplier_data
            )
            if created:
                self.stdout.write(f'  Created supplier: {supplier}')

        for product_data in PRODUCTS:
            product, created = Product.objects.get_or_create(
                id=product_data['id'],
                defaults=product_data
            )
            if created:
                self.stdout.write(f'  Created product: {product}')

        order, created = Order.objects.get_or_create(
            id=10248,
            defaults={
                'customer_id': 'VINET',
                'order_date': datetime(1996, 7, 4, tzinfo=timezone.utc),
                'ship_name': 'Vins et alcools Chevalier',
                'freight': Decimal('32.38'),
            }
        )
        if created:
            self.stdout.write(f'  Created order: {order}')

        for product_id, quantity in ((1, 12), (2, 10), (4, 5)):
            OrderDetail.objects.get_or_create(
                order=order,
                product_id=product_id,
                defaults={
                    'unit_price': Product.objects.get(pk=product_id).unit_price,
                    'quantity': quantity,
                }
            )

        # Seeded rows carry explicit ids
        reset_id_sequences(Category, Supplier, Product, Order)

        self.stdout.write(self.style.SUCCESS(
            f'Seeding complete: {Product.objects.count()} products, '
            f'{OrderDetail.objects.count()} order details.'
        ))
