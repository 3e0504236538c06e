"""
Document Store

Single Responsibility: collection-oriented record creation on top of the ORM.
Apps bind a collection slug (e.g. "inquiries") to a model; callers create
records by slug without importing the model.
"""

from typing import Any, Dict, Type

import structlog
from django.db import models, transaction

from .exceptions import CollectionNotFoundError

logger = structlog.get_logger(__name__)


class DocumentStore:
    """
    Registry of collection slugs to Django models.

    ``create`` assigns the identifier and creation timestamp through the
    model's own defaults, inside a transaction, so a failed write leaves
    nothing behind.
    """

    def __init__(self):
        self._collections: Dict[str, Type[models.Model]] = {}

    def register(self, collection: str, model: Type[models.Model]) -> None:
        self._collections[collection] = model

    def get_model(self, collection: str) -> Type[models.Model]:
        try:
            return self._collections[collection]
        except KeyError:
            raise CollectionNotFoundError(collection) from None

    def create(self, collection: str, data: Dict[str, Any]) -> models.Model:
        """
        Create a new record in ``collection``.

        Args:
            collection: Registered collection slug
            data: Field values keyed by model field name

        Returns:
            The saved model instance, with its generated ``id``

        Raises:
            CollectionNotFoundError: If the collection is not registered
            django.db.DatabaseError: If the write fails
        """
        model = self.get_model(collection)
        with transaction.atomic():
            record = model.objects.create(**data)
        logger.debug("Document created", collection=collection, id=str(record.pk))
        return record


document_store = DocumentStore()
