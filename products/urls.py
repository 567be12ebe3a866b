from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import ProductViewSet

# Paths carry no trailing slash: /products and /products/{id}
router = SimpleRouter(trailing_slash=False)
router.register(r'products', ProductViewSet, basename='product')

urlpatterns = [
    path('', include(router.urls)),
]

"""
Available endpoints:

PRODUCTS:
- GET    /products        - List all products with category/supplier summaries
- POST   /products        - Create a product (201 + Location header)
- GET    /products/{id}   - Get product details including order details
- PUT    /products/{id}   - Update a product (body productId must match path)
- DELETE /products/{id}   - Delete a product and its order details (204)
"""
