"""Base processor."""

import logging
import sys
from typing import Optional, TextIO

from employee_payments.helpers import verify_param
from employee_payments.models import Employee

logger = logging.getLogger(__name__)


class BaseProcessor:
    """Base class for all employee payment processors."""

    SLUG: str
    NAME: str

    def get_payment_message(self, employee: Employee) -> str:
        """
        Build the line reported when the payment of the given employee is processed.

        :param employee: The employee being paid
        :return: The payment report line
        """
        raise NotImplementedError

    def process_payment(self, employee: Employee, stream: Optional[TextIO] = None) -> None:
        """
        Process the payment of an employee and report which processor handled it.

        :param employee: The employee being paid
        :param stream: Output channel for the report line, defaults to stdout
        :raises InvalidEmployeeError: If `employee` is not an Employee
        """
        verify_param(employee, 'employee', Employee)
        message = self.get_payment_message(employee)
        (stream or sys.stdout).write(f'{message}\n')
        logger.info(f'Payment processed for employee {employee.id} using {self.SLUG}')


class NamedProcessor(BaseProcessor):
    """Processor whose report line only differs by its display name."""

    def get_payment_message(self, employee: Employee) -> str:
        """Return the report line naming this processor."""
        return f"{employee.name}'s Payment was processed using {self.NAME} Payment Processor"
