"""Test employee payments helpers"""
from typing import Any

import pytest

from employee_payments.exceptions import InvalidEmployeeError, UnknownIdentifierError
from employee_payments.helpers import get_employee_processor_identifier, get_processor_identifier, verify_param
from employee_payments.models import CompensationType, Employee


@pytest.mark.parametrize(
    'compensation_type, expected',
    [
        (CompensationType.SALARIED, 'SalariedPaymentProcessor'),
        (CompensationType.COMMISSION, 'CommissionPaymentProcessor'),
        (CompensationType.HOURLY, 'HourlyPaymentProcessor'),
        ('hourly', 'HourlyPaymentProcessor'),
    ]
)
def test_get_processor_identifier_defaults(compensation_type: Any, expected: str) -> None:
    """
    Test get_processor_identifier maps every compensation type to its processor.

    :param compensation_type: The compensation type
    :param expected: Expected processor identifier
    :return: None
    """
    assert get_processor_identifier(compensation_type) == expected


def test_get_processor_identifier_uses_settings(settings: Any) -> None:
    """
    Test get_processor_identifier reads the EMPLOYEE_PAYMENTS_PROCESSORS setting.

    :param settings: pytest-django settings fixture
    :return: None
    """
    settings.EMPLOYEE_PAYMENTS_PROCESSORS = {'salaried': 'HourlyPaymentProcessor'}
    assert get_processor_identifier(CompensationType.SALARIED) == 'HourlyPaymentProcessor'
    with pytest.raises(UnknownIdentifierError, match='compensation type: commission'):
        get_processor_identifier(CompensationType.COMMISSION)


def test_get_processor_identifier_invalid_type() -> None:
    """Test get_processor_identifier rejects values outside the compensation types."""
    with pytest.raises(UnknownIdentifierError, match='compensation type: yearly'):
        get_processor_identifier('yearly')


def test_get_employee_processor_identifier(employee: Employee) -> None:
    """
    Test get_employee_processor_identifier uses the employee compensation type.

    :param employee: Employee fixture
    :return: None
    """
    assert get_employee_processor_identifier(employee) == 'SalariedPaymentProcessor'


@pytest.mark.parametrize('param', [None, 'Jane Doe', {'name': 'Jane Doe'}])
def test_verify_param_invalid(param: Any) -> None:
    """
    Test verify_param raises InvalidEmployeeError for missing or wrong types.

    :param param: The value to verify
    :return: None
    """
    with pytest.raises(InvalidEmployeeError) as exc_info:
        verify_param(param, 'employee', Employee)
    assert str(exc_info.value) == (
        'verify_param failed: employee is required and must be '
        f'(Employee), but got ({type(param).__name__})'
    )


def test_verify_param_valid(employee: Employee) -> None:
    """
    Test verify_param accepts the required type.

    :param employee: Employee fixture
    :return: None
    """
    verify_param(employee, 'employee', Employee)
