from django.shortcuts import render
from django.urls import reverse


def catalog_view(request):
    """Product list page; the list itself is fetched by the page script"""
    return render(request, 'products/catalog.html', {
        'products_url': reverse('product-list'),
    })
