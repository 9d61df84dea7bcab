import logging
import threading
from typing import Any, Dict, NoReturn, Type, TypeVar

from .exceptions import IllegalOperationError

log = logging.getLogger(__name__)

T = TypeVar("T", bound="Singleton")


class SingletonMeta(type):
    """
    Metaclass that forbids direct construction of singleton classes.

    Instances are only produced by `get_instance()`.
    """

    def __call__(cls, *args: Any, **kwargs: Any) -> NoReturn:
        raise IllegalOperationError(cls.__name__, "constructed directly")


class Singleton(metaclass=SingletonMeta):
    """
    Mixin giving each concrete subclass exactly one lazily created instance.
    """

    _instances: Dict[type, "Singleton"] = {}
    _lock = threading.RLock()

    @classmethod
    def get_instance(cls: Type[T]) -> T:
        instance = Singleton._instances.get(cls)
        if instance is None:
            with Singleton._lock:
                instance = Singleton._instances.get(cls)
                if instance is None:
                    log.debug(f"Creating singleton instance of {cls.__name__}")
                    # Bypass SingletonMeta.__call__
                    instance = type.__call__(cls)
                    Singleton._instances[cls] = instance
        return instance  # type: ignore[return-value]

    @classmethod
    def has_instance(cls) -> bool:
        return cls in Singleton._instances

    @classmethod
    def clear_instance(cls) -> None:
        with Singleton._lock:
            Singleton._instances.pop(cls, None)

    def __copy__(self) -> NoReturn:
        raise IllegalOperationError(type(self).__name__, "cloned")

    def __deepcopy__(self, memo: Dict[int, Any]) -> NoReturn:
        raise IllegalOperationError(type(self).__name__, "cloned")

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        raise IllegalOperationError(type(self).__name__, "serialized")
