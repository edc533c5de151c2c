"""
License lifecycle handlers.

Handlers for issuing, fetching, checking, extending and invalidating
licenses. Callers arrive already authenticated: ``owner`` on each
command is the identity recovered from the bearer token.
"""
import logging
from typing import Optional

from core.domain.exceptions import (
    ForbiddenError,
    NotFoundError,
    NotFoundOrForbiddenError,
)
from core.infrastructure.events import event_bus
from licenses.application.commands.extend_license import ExtendLicenseCommand
from licenses.application.commands.invalidate_license import InvalidateLicenseCommand
from licenses.application.commands.issue_license import IssueLicenseCommand
from licenses.application.dto.license_dto import (
    IssuedLicenseDTO,
    LicenseDTO,
    LicenseValidityDTO,
)
from licenses.application.queries.check_license import CheckLicenseQuery
from licenses.application.queries.get_license import GetLicenseQuery
from licenses.domain.events import (
    LicenseChecked,
    LicenseExtended,
    LicenseInvalidated,
    LicenseIssued,
)
from licenses.domain.license import License, utcnow, validate_duration
from licenses.domain.services import (
    LicenseKeyGenerator,
    LicenseLifecycleManager,
    LicenseValidator,
)
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class IssueLicenseHandler:
    """Handler for IssueLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        key_generator: Optional[LicenseKeyGenerator] = None,
    ):
        """Initialize handler with repository and key generator."""
        self.license_repository = license_repository
        self.key_generator = key_generator or LicenseKeyGenerator()

    async def handle(self, command: IssueLicenseCommand) -> IssuedLicenseDTO:
        """
        Handle issue license command.

        Args:
            command: IssueLicenseCommand

        Returns:
            IssuedLicenseDTO with the new key and its expiry

        Raises:
            ValidationError: If duration is out of bounds
        """
        license = License.create(
            key=self.key_generator.generate(),
            owner=command.owner,
            product=command.product,
            duration_minutes=command.duration_minutes,
            one_time=command.one_time,
        )
        saved = await self.license_repository.add(license)

        logger.info(
            "License issued",
            extra={"owner": saved.owner, "expire_time": saved.expire_time.isoformat()},
        )
        await event_bus.publish(
            LicenseIssued(key=saved.key, owner=saved.owner, expire_time=saved.expire_time)
        )

        return IssuedLicenseDTO(key=saved.key, expire_time=saved.expire_time)


class GetLicenseHandler:
    """Handler for GetLicenseQuery."""

    def __init__(self, license_repository: LicenseRepository):
        self.license_repository = license_repository

    async def handle(self, query: GetLicenseQuery) -> LicenseDTO:
        """
        Handle get license query.

        Raises:
            NotFoundError: If no license has the key
        """
        license = await self.license_repository.find_by_key(query.key)
        if license is None:
            raise NotFoundError("License not found")
        return LicenseDTO(
            key=license.key,
            owner=license.owner,
            product=license.product,
            one_time=license.one_time,
            expire_time=license.expire_time,
            created_at=license.created_at,
        )


class CheckLicenseHandler:
    """
    Handler for CheckLicenseQuery.

    Never raises: an unknown key, or a lookup that fails, is reported
    as an invalid key.
    """

    def __init__(self, license_repository: LicenseRepository):
        self.license_repository = license_repository

    async def handle(self, query: CheckLicenseQuery) -> LicenseValidityDTO:
        """
        Handle check license query.

        Args:
            query: CheckLicenseQuery

        Returns:
            LicenseValidityDTO with validity, expiry and a message
        """
        try:
            license = await self.license_repository.find_by_key(query.key)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.error("License lookup failed during validity check", exc_info=True)
            license = None

        valid, message = LicenseValidator.check(license)
        await event_bus.publish(LicenseChecked(key=query.key, valid=valid, result=message))
        return LicenseValidityDTO(
            valid=valid,
            expire_time=license.expire_time if license else None,
            message=message,
        )


class ExtendLicenseHandler:
    """Handler for ExtendLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        self.license_repository = license_repository

    async def handle(self, command: ExtendLicenseCommand) -> IssuedLicenseDTO:
        """
        Handle extend license command.

        Args:
            command: ExtendLicenseCommand

        Returns:
            IssuedLicenseDTO with the key and its new expiry

        Raises:
            ValidationError: If additional_minutes is below the minimum
            NotFoundOrForbiddenError: If the key is unknown, belongs to
                another identity, or the conditional write matched nothing
        """
        # Reject bad input before touching storage.
        validate_duration(command.additional_minutes, what="Additional time")

        try:
            license = await self.license_repository.find_by_key(command.key)
            if license is None:
                raise NotFoundError("License not found")
            extended = await LicenseLifecycleManager.extend_license(
                license,
                command.owner,
                command.additional_minutes,
                self.license_repository,
            )
        except (NotFoundError, ForbiddenError) as e:
            logger.warning("Extend rejected: %s", e.message, extra={"owner": command.owner})
            raise NotFoundOrForbiddenError() from e
        except NotFoundOrForbiddenError:
            logger.warning("Extend matched no rows", extra={"owner": command.owner})
            raise

        logger.info(
            "License extended",
            extra={"owner": command.owner, "expire_time": extended.expire_time.isoformat()},
        )
        await event_bus.publish(
            LicenseExtended(
                key=extended.key,
                owner=extended.owner,
                new_expire_time=extended.expire_time,
            )
        )

        return IssuedLicenseDTO(key=extended.key, expire_time=extended.expire_time)


class InvalidateLicenseHandler:
    """Handler for InvalidateLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        self.license_repository = license_repository

    async def handle(self, command: InvalidateLicenseCommand) -> None:
        """
        Handle invalidate license command.

        Raises:
            NotFoundOrForbiddenError: If no license matched key and owner
        """
        try:
            await LicenseLifecycleManager.invalidate_license(
                command.key, command.owner, self.license_repository, utcnow()
            )
        except NotFoundOrForbiddenError:
            logger.warning("Invalidate matched no rows", extra={"owner": command.owner})
            raise

        logger.info("License invalidated", extra={"owner": command.owner})
        await event_bus.publish(LicenseInvalidated(key=command.key, owner=command.owner))
