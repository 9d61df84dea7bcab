from .component import Component
from .config import SlimBaseConfig, load_config_from_path, resolve_locale
from .exceptions import (
    IllegalOperationError,
    PropertyError,
    ReadOnlyPropertyError,
    SlimBaseError,
    UnknownMethodError,
    UnknownPropertyError,
    WriteOnlyPropertyError,
)
from .loaders import FileSystemLoader, MemoryLoader
from .singleton import Singleton
from .translator import Translator

__all__ = [
    "Component",
    "Singleton",
    "Translator",
    "FileSystemLoader",
    "MemoryLoader",
    "SlimBaseConfig",
    "load_config_from_path",
    "resolve_locale",
    "SlimBaseError",
    "PropertyError",
    "UnknownPropertyError",
    "ReadOnlyPropertyError",
    "WriteOnlyPropertyError",
    "UnknownMethodError",
    "IllegalOperationError",
]
