"""Employee payments models.

Employees are plain immutable records built by the caller; nothing here is persisted.
"""
from dataclasses import dataclass

from django.db import models
from django.utils.translation import gettext_lazy as _


class CompensationType(models.TextChoices):
    """Compensation types."""

    SALARIED = 'salaried', _('Salaried')
    COMMISSION = 'commission', _('Commission')
    HOURLY = 'hourly', _('Hourly')


@dataclass(frozen=True)
class Employee:
    """Employee record."""

    id: int
    name: str
    compensation_type: CompensationType


SAMPLE_EMPLOYEES = (
    Employee(id=1, name='Employee One', compensation_type=CompensationType.COMMISSION),
    Employee(id=2, name='Employee Two', compensation_type=CompensationType.HOURLY),
    Employee(id=3, name='Employee Three', compensation_type=CompensationType.SALARIED),
    Employee(id=4, name='Employee Four', compensation_type=CompensationType.SALARIED),
)
