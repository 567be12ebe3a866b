from django.core.management.base import BaseCommand

from products.client import CatalogClient, format_product


class Command(BaseCommand):
    help = 'Fetches the product list from the catalog API and prints it'

    def add_arguments(self, parser):
        parser.add_argument(
            '--url',
            help='Base URL of the catalog API (defaults to CATALOG_CONFIG API_URL)',
        )

    def handle(self, *args, **options):
        products = CatalogClient(base_url=options['url']).fetch_products()

        if not products:
            self.stdout.write('Loading...')
            return

        self.stdout.write(self.style.SUCCESS('Northwind Final Project'))
        for product in products:
            self.stdout.write(format_product(product))
