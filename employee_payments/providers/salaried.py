"""Salaried processor"""

from employee_payments.providers.base import NamedProcessor


class SalariedPaymentProcessor(NamedProcessor):
    """Pays employees on a fixed salary."""

    SLUG = 'SalariedPaymentProcessor'
    NAME = 'Salaried'
