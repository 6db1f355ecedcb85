"""Utility functions for employee payments."""

from __future__ import annotations

from typing import Any

from django.conf import settings

from employee_payments.exceptions import InvalidEmployeeError, UnknownIdentifierError
from employee_payments.models import CompensationType, Employee
from employee_payments.settings.common_production import DEFAULT_EMPLOYEE_PAYMENTS_PROCESSORS


def verify_param(param: Any, param_name: str, required_type: Any) -> None:
    """
    Verify a parameter type.

    :param param: The parameter to verify.
    :param param_name: The name of the parameter to be used in the exception message.
    :param required_type: The required type of the parameter.
    :raises InvalidEmployeeError: If the parameter is None or not of the required type.
    """
    if param is None or not isinstance(param, required_type):
        raise InvalidEmployeeError(
            f'verify_param failed: {param_name} is required and must be '
            f'({required_type.__name__}), but got ({type(param).__name__})'
        )


def get_processor_identifier(compensation_type: CompensationType | str) -> str:
    """
    Return the registry identifier of the processor that pays the given compensation type.

    The mapping is read from the `EMPLOYEE_PAYMENTS_PROCESSORS` setting and falls back to the defaults.

    :param compensation_type: The compensation type, as enum member or raw value.
    :return: The processor identifier.
    :raises UnknownIdentifierError: If no processor is mapped to the compensation type.
    """
    mapping = getattr(settings, 'EMPLOYEE_PAYMENTS_PROCESSORS', DEFAULT_EMPLOYEE_PAYMENTS_PROCESSORS)
    try:
        return mapping[CompensationType(compensation_type).value]
    except (KeyError, ValueError) as exc:
        raise UnknownIdentifierError(
            f'No PaymentProcessor is mapped to the compensation type: {compensation_type}'
        ) from exc


def get_employee_processor_identifier(employee: Employee) -> str:
    """Return the processor identifier for the employee's compensation type."""
    verify_param(employee, 'employee', Employee)
    return get_processor_identifier(employee.compensation_type)
