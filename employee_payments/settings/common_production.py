"""Common Settings"""
from typing import Any

DEFAULT_EMPLOYEE_PAYMENTS_PROCESSORS = {
    'salaried': 'SalariedPaymentProcessor',
    'commission': 'CommissionPaymentProcessor',
    'hourly': 'HourlyPaymentProcessor',
}


def plugin_settings(settings: Any) -> None:
    """
    plugin settings
    """
    settings.EMPLOYEE_PAYMENTS_PROCESSORS = getattr(
        settings,
        'EMPLOYEE_PAYMENTS_PROCESSORS',
        dict(DEFAULT_EMPLOYEE_PAYMENTS_PROCESSORS),
    )
