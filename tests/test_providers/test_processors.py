"""Test the payment processor variants"""
import io
import logging

import pytest

from employee_payments.providers.commission import CommissionPaymentProcessor
from employee_payments.providers.hourly import HourlyPaymentProcessor
from employee_payments.providers.salaried import SalariedPaymentProcessor


@pytest.mark.parametrize('processor_class, expected', [
    (SalariedPaymentProcessor, "Jane Doe's Payment was processed using Salaried Payment Processor\n"),
    (CommissionPaymentProcessor, "Jane Doe's Payment was processed using Commission Payment Processor\n"),
    (HourlyPaymentProcessor, "Jane Doe's Payment was processed using Hourly Payment Processor\n"),
])
def test_process_payment_writes_one_line(processor_class, expected, employee):
    """Verify that each processor reports the employee and its own name"""
    stream = io.StringIO()
    processor_class().process_payment(employee, stream=stream)
    assert stream.getvalue() == expected


def test_process_payment_defaults_to_stdout(employee, capsys):
    """Verify that the report line goes to stdout when no stream is given"""
    HourlyPaymentProcessor().process_payment(employee)
    assert capsys.readouterr().out == "Jane Doe's Payment was processed using Hourly Payment Processor\n"


def test_process_payment_logs(employee, caplog):
    """Verify that processed payments are logged"""
    with caplog.at_level(logging.INFO, logger='employee_payments.providers.base'):
        SalariedPaymentProcessor().process_payment(employee, stream=io.StringIO())
    assert 'Payment processed for employee 10 using SalariedPaymentProcessor' in caplog.text


def test_processor_is_reusable(employee):
    """Verify that one processor instance can pay many employees"""
    processor = CommissionPaymentProcessor()
    stream = io.StringIO()
    processor.process_payment(employee, stream=stream)
    processor.process_payment(employee, stream=stream)
    assert stream.getvalue().splitlines() == [
        "Jane Doe's Payment was processed using Commission Payment Processor",
    ] * 2
