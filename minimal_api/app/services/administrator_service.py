"""
Business logic for administrators.

``AdministratorService`` sits between the HTTP handlers and
``AdministratorRepository``.  It maps DTOs to entities, checks
credentials for login and raises ``ValueError`` when an administrator
cannot be found; handlers translate that into a 404.
"""

import hmac
import logging
from typing import List, Optional

from ..models.administrator import Administrator
from ..repositories.administrator_repository import AdministratorRepository
from ..schemas.administrator import AdministratorDTO, LoginDTO


logger = logging.getLogger(__name__)


class AdministratorService:
    """Operations on administrator accounts."""

    def __init__(self, repository: AdministratorRepository) -> None:
        self.repository = repository

    def login(self, credentials: LoginDTO) -> Optional[Administrator]:
        """Return the administrator matching the credentials, else ``None``."""
        if not credentials.email or not credentials.password:
            return None
        administrator = self.repository.get_by_email(credentials.email)
        if administrator is None:
            return None
        if not hmac.compare_digest(
            administrator.password.encode("utf-8"), credentials.password.encode("utf-8")
        ):
            return None
        return administrator

    def email_taken(self, email: str) -> bool:
        return self.repository.get_by_email(email) is not None

    def create(self, data: AdministratorDTO) -> Administrator:
        """Persist a new administrator.

        The payload must already have passed ``validate_administrator``.
        The password is stored as given.
        """
        administrator = self.repository.create(
            Administrator(email=data.email, password=data.password, profile=data.profile)
        )
        logger.info("Created administrator %s (%s)", administrator.id, administrator.profile)
        return administrator

    def get(self, administrator_id: int) -> Administrator:
        administrator = self.repository.get(administrator_id)
        if administrator is None:
            raise ValueError(f"Administrator {administrator_id} not found")
        return administrator

    def list(self, page: Optional[int] = None) -> List[Administrator]:
        return self.repository.list(page)

    def delete(self, administrator_id: int) -> None:
        administrator = self.get(administrator_id)
        self.repository.delete(administrator)
        logger.info("Deleted administrator %s", administrator_id)

    def count(self) -> int:
        return self.repository.count()
