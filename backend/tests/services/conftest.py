"""Service test fixtures — repository and service over the per-test database."""

import pytest

from customer_health.infrastructure.checklist_repository import (
    SqlAlchemyChecklistRepository,
)
from customer_health.services.checklist_service import ChecklistService


@pytest.fixture
def repository(db_manager):
    return SqlAlchemyChecklistRepository(db_manager)


@pytest.fixture
def service(repository):
    return ChecklistService(repository)
