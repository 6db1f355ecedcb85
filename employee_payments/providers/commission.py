"""Commission processor"""

from employee_payments.providers.base import NamedProcessor


class CommissionPaymentProcessor(NamedProcessor):
    """Pays employees on commission."""

    SLUG = 'CommissionPaymentProcessor'
    NAME = 'Commission'
