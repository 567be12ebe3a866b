from django.apps import AppConfig


class ProductsConfig(AppConfig):
    """
    Configuration for the Products app.
    Product catalog CRUD over the Northwind schema.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'products'
    verbose_name = 'Product Catalog'
