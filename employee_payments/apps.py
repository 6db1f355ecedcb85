"""
employee_payments Django application initialization.
"""

from django.apps import AppConfig


class EmployeePaymentsConfig(AppConfig):
    """
    Configuration for the employee_payments Django application.
    """

    name = 'employee_payments'

    # pylint: disable=duplicate-code
    plugin_app = {
        'settings_config': {
            'lms.djangoapp': {
                'production': {
                    'relative_path': 'settings.common_production',
                }
            }
        },
    }
    # pylint: enable=duplicate-code

    def ready(self) -> None:
        """Register every known payment processor once the app registry is loaded."""
        from employee_payments.providers.registry import registry  # pylint: disable=import-outside-toplevel

        registry.register_all_known_variants()
