"""Processors registry"""

import logging
import threading
from typing import Callable, Dict, Iterable, List, Type

from employee_payments.exceptions import InvalidIdentifierError, InvalidProcessorError, UnknownIdentifierError

from .base import BaseProcessor
from .commission import CommissionPaymentProcessor
from .hourly import HourlyPaymentProcessor
from .salaried import SalariedPaymentProcessor

logger = logging.getLogger(__name__)

ProcessorConstructor = Callable[[], BaseProcessor]

KNOWN_PROCESSORS = (
    SalariedPaymentProcessor,
    CommissionPaymentProcessor,
    HourlyPaymentProcessor,
)


def build_constructor(processor_class: Type[BaseProcessor]) -> ProcessorConstructor:
    """
    Return a zero-argument factory creating instances of `processor_class`.

    :param processor_class: The processor class to instantiate
    :return: The factory
    """
    def construct() -> BaseProcessor:
        return processor_class()

    construct.__name__ = f'create_{processor_class.SLUG}'
    return construct


class ProcessorRegistry:
    """
    Map processor identifiers to processor classes and cached constructors.

    The known processors are registered once, either when the Django app is ready or on first use. The
    constructor of each identifier is built on its first `create` and reused afterwards.
    """

    def __init__(self, known_processors: Iterable[Type[BaseProcessor]] = KNOWN_PROCESSORS) -> None:
        """Initialize an empty registry that will load `known_processors` on first use."""
        self._known_processors = tuple(known_processors)
        self._classes: Dict[str, Type[BaseProcessor]] = {}
        self._constructors: Dict[str, ProcessorConstructor] = {}
        self._lock = threading.RLock()
        self._loaded = False

    def register(self, processor_class: Type[BaseProcessor]) -> bool:
        """
        Register a processor class under its SLUG. The first registration of an identifier wins.

        :param processor_class: A BaseProcessor subclass
        :return: True if the class was registered, False if its identifier was already taken
        :raises InvalidProcessorError: If `processor_class` is not a processor or has no SLUG
        """
        if not isinstance(processor_class, type) or not issubclass(processor_class, BaseProcessor):
            raise InvalidProcessorError(f'Not a payment processor: {processor_class!r}')
        slug = getattr(processor_class, 'SLUG', None)
        if not slug or not isinstance(slug, str):
            raise InvalidProcessorError(f'Payment processor {processor_class.__name__} has no identifier')

        with self._lock:
            registered = self._classes.setdefault(slug, processor_class)
        if registered is not processor_class:
            logger.warning(
                f'PaymentProcessor {processor_class.__name__} ignored, identifier {slug} '
                f'is already registered to {registered.__name__}'
            )
            return False
        return True

    def register_all_known_variants(self) -> int:
        """
        Register every known processor. Running it again has no effect.

        :return: The number of identifiers newly registered
        """
        with self._lock:
            if self._loaded:
                return 0
            count = sum(1 for processor_class in self._known_processors if self.register(processor_class))
            self._loaded = True
        logger.info(f'Registered {count} payment processors: {", ".join(self.identifiers())}')
        return count

    def identifiers(self) -> List[str]:
        """Return the sorted registered identifiers."""
        with self._lock:
            return sorted(self._classes)

    def is_registered(self, identifier: str) -> bool:
        """Return True if a processor is registered under `identifier`."""
        self._ensure_loaded()
        return identifier in self._classes

    def create(self, identifier: str) -> BaseProcessor:
        """
        Return a new instance of the processor registered under `identifier`.

        :param identifier: The processor identifier, matched exactly
        :return: A processor instance
        :raises InvalidIdentifierError: If `identifier` is None or empty
        :raises UnknownIdentifierError: If no processor is registered under `identifier`
        """
        if not identifier or not isinstance(identifier, str):
            raise InvalidIdentifierError('identifier can not be null or empty')

        self._ensure_loaded()
        constructor = self._constructors.get(identifier)
        if constructor is None:
            constructor = self._get_constructor(identifier)
        return constructor()

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.register_all_known_variants()

    def _get_constructor(self, identifier: str) -> ProcessorConstructor:
        with self._lock:
            constructor = self._constructors.get(identifier)
            if constructor is not None:
                return constructor

            try:
                processor_class = self._classes[identifier]
            except KeyError as exc:
                raise UnknownIdentifierError(
                    f'No PaymentProcessor has been registered with the identifier: {identifier}'
                ) from exc

            constructor = build_constructor(processor_class)
            self._constructors[identifier] = constructor
        logger.debug(f'Cached constructor for PaymentProcessor {identifier}')
        return constructor


registry = ProcessorRegistry()


def get_processor(slug: str) -> BaseProcessor:
    """
    Return an *instance* of the processor that matches `slug`
    or raise UnknownIdentifierError if unknown.
    """
    return registry.create(slug)
