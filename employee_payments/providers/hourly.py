"""Hourly processor"""

from employee_payments.providers.base import NamedProcessor


class HourlyPaymentProcessor(NamedProcessor):
    """Pays employees by the hour."""

    SLUG = 'HourlyPaymentProcessor'
    NAME = 'Hourly'
