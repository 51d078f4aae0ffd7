"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions — the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent IDs.
        """
        return Product.objects.filter(id=id).first()

    def get_for_update(self, id: int) -> Optional[Product]:
        return Product.objects.select_for_update().filter(id=id).first()

    def list(self) -> List[Product]:
        """List every product ordered by id."""
        return list(Product.objects.order_by("id"))

    def save(self, entity: Product, update_fields: Optional[List[str]] = None) -> Product:
        """Persist (create or update) a product.

        ``update_fields`` restricts the UPDATE to the given columns.
        """
        with transaction.atomic():
            entity.save(update_fields=update_fields)
        logger.info("product.saved", product_id=entity.id)
        return entity

    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if the product was found and deleted,
        ``False`` if no product exists with the given ID.
        """
        with transaction.atomic():
            deleted, _ = Product.objects.filter(id=id).delete()
        if not deleted:
            return False
        logger.info("product.deleted", product_id=id)
        return True
