"""Process employee payments with the processor matching each compensation type."""
import logging
from typing import Any, List, Optional

from django.core.management.base import BaseCommand, CommandError
from rest_framework.exceptions import ValidationError

from employee_payments.exceptions import ProcessorRegistryError
from employee_payments.helpers import get_employee_processor_identifier
from employee_payments.models import SAMPLE_EMPLOYEES, Employee
from employee_payments.providers.registry import get_processor, registry
from employee_payments.serializers import build_employees

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Process the payment of each employee using the processor of its compensation type'

    def add_arguments(self, parser: Any) -> None:
        parser.add_argument(
            '--employee',
            action='append',
            dest='employees',
            metavar='NAME:TYPE',
            help='Employee to pay, e.g. "Jane Doe:hourly". Repeat for more; defaults to the sample roster.',
        )
        parser.add_argument(
            '--list-processors',
            action='store_true',
            help='List the registered payment processor identifiers and exit.',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        if options['list_processors']:
            registry.register_all_known_variants()
            for identifier in registry.identifiers():
                self.stdout.write(identifier)
            return

        employees = self.get_employees(options['employees'])
        for employee in employees:
            try:
                processor = get_processor(get_employee_processor_identifier(employee))
            except ProcessorRegistryError as exc:
                raise CommandError(str(exc)) from exc
            processor.process_payment(employee, stream=self.stdout)

        logger.info(f'Processed payments for {len(employees)} employees')

    @staticmethod
    def get_employees(values: Optional[List[str]]) -> List[Employee]:
        """
        Return the employees described by NAME:TYPE values, or the sample roster when there are none.

        :param values: The raw --employee values
        :return: The employees, numbered in the given order
        :raises CommandError: If a value is malformed or invalid
        """
        if not values:
            return list(SAMPLE_EMPLOYEES)

        records = []
        for index, value in enumerate(values, start=1):
            name, separator, compensation_type = value.rpartition(':')
            if not separator:
                raise CommandError(f'Invalid employee "{value}", expected NAME:TYPE')
            records.append({'id': index, 'name': name.strip(), 'compensation_type': compensation_type.strip()})

        try:
            return build_employees(records)
        except ValidationError as exc:
            raise CommandError(f'Invalid employees: {exc.detail}') from exc
