"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from datetime import datetime
from typing import Optional

from asgiref.sync import sync_to_async

from licenses.domain.license import License
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import LicenseRepository


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: LicenseModel) -> License:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model

        Returns:
            License domain entity
        """
        return License(
            key=model.key,
            owner=model.owner,
            product=model.product,
            one_time=model.one_time,
            expire_time=model.expire_time,
            created_at=model.created_at,
        )

    def _to_model(self, license: License) -> LicenseModel:
        """
        Convert domain entity to an unsaved Django model.

        Args:
            license: License domain entity

        Returns:
            Django License model
        """
        return LicenseModel(
            key=license.key,
            owner=license.owner,
            product=license.product,
            one_time=license.one_time,
            expire_time=license.expire_time,
            created_at=license.created_at,
        )

    @sync_to_async
    def add(self, license: License) -> License:
        """
        Insert a new license.

        ``force_insert`` makes a duplicate key raise IntegrityError
        instead of updating the existing row.

        Args:
            license: License entity to insert

        Returns:
            Stored license entity
        """
        model = self._to_model(license)
        model.save(force_insert=True)
        return self._to_domain(model)

    @sync_to_async
    def find_by_key(self, key: str) -> Optional[License]:
        """
        Find a license by key string.

        Args:
            key: License key string

        Returns:
            License entity or None if not found
        """
        try:
            model = LicenseModel.objects.get(key=key)
            return self._to_domain(model)
        except LicenseModel.DoesNotExist:
            return None

    @sync_to_async
    def update_expiry(self, key: str, owner: str, expire_time: datetime) -> int:
        """
        Set expire_time on the license matching both key and owner.

        Args:
            key: License key string
            owner: Identity the license must belong to
            expire_time: New expiry

        Returns:
            Number of rows updated
        """
        return LicenseModel.objects.filter(key=key, owner=owner).update(
            expire_time=expire_time
        )
