"""
HTTP client for the catalog API.

Terminal counterpart of the catalog page: fetches the product list once and
tolerates both list response shapes (bare array or ``$values`` wrapper).
"""

import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

VALUES_KEY = '$values'


def unwrap_values(payload):
    """
    Return the product array from a list response.

    Reference-preserving serializers emit ``{"$id": ..., "$values": [...]}``;
    anything else is taken to be the array itself.
    """
    if isinstance(payload, dict) and isinstance(payload.get(VALUES_KEY), list):
        return payload[VALUES_KEY]
    if isinstance(payload, list):
        return payload
    return []


class CatalogClient:
    def __init__(self, base_url=None, timeout=None, session=None):
        config = settings.CATALOG_CONFIG
        self.base_url = (base_url or config['API_URL']).rstrip('/')
        self.timeout = timeout or config.get('CLIENT_TIMEOUT', 5)
        self.session = session or requests.Session()

    def fetch_products(self):
        """
        Fetch the product list.

        Failures are logged and yield an empty list; there is no retry.
        """
        url = f"{self.base_url}/products"
        logger.info("CatalogClient GET %s", url)

        try:
            resp = self.session.get(
                url,
                headers={'Accept': 'application/json'},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error fetching data: %s", exc)
            return []

        return unwrap_values(payload)


def format_product(product):
    return f"Product Id: {product.get('productId')} - {product.get('productName')}"
