"""Employee payments serializers."""
from typing import Any, Dict, Iterable, List

from rest_framework import serializers

from employee_payments.models import CompensationType, Employee


class EmployeeListSerializer(serializers.ListSerializer):
    """Serializer for a roster of employees."""

    def validate(self, attrs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Reject rosters where two employees share an id."""
        ids = [item['id'] for item in attrs]
        if len(ids) != len(set(ids)):
            raise serializers.ValidationError('Employee ids must be unique.')
        return attrs


class EmployeeSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """Serializer for Employee records."""

    id = serializers.IntegerField(min_value=1)
    name = serializers.CharField(max_length=255)
    compensation_type = serializers.ChoiceField(choices=CompensationType.choices)

    class Meta:
        list_serializer_class = EmployeeListSerializer

    def create(self, validated_data: Dict[str, Any]) -> Employee:
        """Build the immutable Employee record."""
        return Employee(
            id=validated_data['id'],
            name=validated_data['name'],
            compensation_type=CompensationType(validated_data['compensation_type']),
        )


def build_employees(records: Iterable[Dict[str, Any]]) -> List[Employee]:
    """
    Validate employee records and return them as Employee instances, in the same order.

    :param records: Dictionaries with `id`, `name` and `compensation_type`
    :return: The employees
    :raises rest_framework.exceptions.ValidationError: If any record is invalid
    """
    serializer = EmployeeSerializer(data=list(records), many=True)
    serializer.is_valid(raise_exception=True)
    return serializer.save()
