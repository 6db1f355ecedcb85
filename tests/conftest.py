"""Required fixtures for tests."""
# tests/conftest.py
import pytest

from employee_payments.models import CompensationType, Employee
from employee_payments.providers.registry import ProcessorRegistry


@pytest.fixture
def employee() -> Employee:
    """Return a single salaried employee."""
    return Employee(id=10, name='Jane Doe', compensation_type=CompensationType.SALARIED)


@pytest.fixture
def fresh_registry() -> ProcessorRegistry:
    """Return a registry that has not loaded its processors yet."""
    return ProcessorRegistry()
