import inspect
from typing import Any, Callable, Optional

from .exceptions import (
    ReadOnlyPropertyError,
    UnknownMethodError,
    UnknownPropertyError,
    WriteOnlyPropertyError,
)

_MISSING = object()


def _is_data_descriptor(cls: type, name: str) -> bool:
    attr = inspect.getattr_static(cls, name, _MISSING)
    return hasattr(type(attr), "__set__") or hasattr(type(attr), "__delete__")


class Component:
    """
    Base class that routes public attribute access through accessor methods.

    A property `name` is backed by `get_<name>` / `set_<name>` methods, or by a
    plain field (an instance attribute, a class annotation or a plain class
    value). Names starting with an underscore are private storage and never
    take part in dispatch.

    Resolution is recomputed on every access, so accessors attached to the
    class at runtime are honoured immediately.
    """

    # --- Attribute protocol ---

    def __getattr__(self, name: str) -> Any:
        # Reached when regular lookup misses, or when a native property raised
        # AttributeError.
        if name.startswith("_") or _is_data_descriptor(type(self), name):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return self.read_property(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or _is_data_descriptor(type(self), name):
            object.__setattr__(self, name, value)
            return
        self.write_property(name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith("_") or _is_data_descriptor(type(self), name):
            object.__delattr__(self, name)
            return
        self.unset_property(name)

    # --- Dispatch ---

    def read_property(self, name: str) -> Any:
        getter = self._accessor("get_", name)
        if getter is not None:
            return getter()

        if self._has_field(name):
            return self._field_value(name)

        if self._accessor("set_", name) is not None:
            raise WriteOnlyPropertyError(type(self).__name__, name)
        raise UnknownPropertyError(type(self).__name__, name)

    def write_property(self, name: str, value: Any) -> None:
        setter = self._accessor("set_", name)
        if setter is not None:
            setter(value)
            return

        if self._has_field(name):
            object.__setattr__(self, name, value)
            return

        if self._accessor("get_", name) is not None:
            raise ReadOnlyPropertyError(type(self).__name__, name)
        raise UnknownPropertyError(type(self).__name__, name, action="Setting")

    def isset_property(self, name: str) -> bool:
        """
        Returns whether the property has a getter that yields a non-None value.

        Plain fields are not consulted.
        """
        getter = self._accessor("get_", name)
        if getter is not None:
            return getter() is not None
        return False

    def unset_property(self, name: str) -> None:
        has_field = self._has_field(name)
        setter = self._accessor("set_", name)
        has_getter = self._accessor("get_", name) is not None

        if not has_field and setter is None and has_getter:
            raise ReadOnlyPropertyError(
                type(self).__name__, name, action="Unsetting"
            )
        if not has_field and not has_getter:
            raise UnknownPropertyError(type(self).__name__, name, action="Unsetting")

        if setter is not None:
            setter(None)
        else:
            object.__setattr__(self, name, None)

    def call_method(self, name: str, *args: Any, **kwargs: Any) -> Any:
        if not self.has_method(name):
            raise UnknownMethodError(type(self).__name__, name)
        return getattr(self, name)(*args, **kwargs)

    # --- Introspection ---

    def has_property(self, name: str, check_vars: bool = True) -> bool:
        """
        Returns whether a property is defined.

        A property is defined if the class has a getter or setter for `name`,
        or, when `check_vars` is true, a field named `name`.
        """
        return self.can_get_property(name, check_vars) or self.can_set_property(
            name, False
        )

    def can_get_property(self, name: str, check_vars: bool = True) -> bool:
        return self._accessor("get_", name) is not None or (
            check_vars and self._has_field(name)
        )

    def can_set_property(self, name: str, check_vars: bool = True) -> bool:
        return self._accessor("set_", name) is not None or (
            check_vars and self._has_field(name)
        )

    def has_method(self, name: str) -> bool:
        return callable(getattr(type(self), name, None))

    # --- Internals ---

    def _accessor(self, prefix: str, name: str) -> Optional[Callable[..., Any]]:
        method_name = f"{prefix}{name}"
        if not self.has_method(method_name):
            return None
        # Class-level helpers such as Singleton.get_instance are not accessors.
        attr = inspect.getattr_static(type(self), method_name, None)
        if isinstance(attr, (classmethod, staticmethod)):
            return None
        return getattr(self, method_name)

    def _has_field(self, name: str) -> bool:
        if name in vars(self):
            return True

        cls = type(self)
        for klass in cls.__mro__:
            if name in inspect.get_annotations(klass):
                return True

        attr = inspect.getattr_static(cls, name, _MISSING)
        if attr is _MISSING:
            return False
        return not callable(attr) and not hasattr(type(attr), "__get__")

    def _field_value(self, name: str) -> Any:
        instance_vars = vars(self)
        if name in instance_vars:
            return instance_vars[name]
        # Declared but never assigned annotations read as None.
        return inspect.getattr_static(type(self), name, None)
