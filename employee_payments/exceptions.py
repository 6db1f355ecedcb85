"""Employee payments generic exceptions."""


class ProcessorRegistryError(ValueError):
    """Base exception for payment processor registry errors."""


class InvalidIdentifierError(ProcessorRegistryError):
    """Custom exception raised when a processor identifier is null or empty."""


class UnknownIdentifierError(ProcessorRegistryError):
    """Custom exception raised when no processor is registered for an identifier."""


class InvalidProcessorError(ProcessorRegistryError):
    """Custom exception raised when registering something that is not a payment processor."""


class InvalidEmployeeError(Exception):
    """Custom exception raised when a processor receives an invalid employee."""
