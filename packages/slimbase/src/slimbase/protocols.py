from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol


class FileLoaderProtocol(Protocol):
    """
    Defines the contract for loading translation resources.
    """

    def load(self, locale: str, file: str, namespace: str) -> Dict[str, str]:
        """
        Loads the key/value mapping stored under a namespace for a locale.

        Args:
            locale: The target locale code (e.g., 'en', 'fr').
            file: The resource name without extension (e.g., 'messages').
            namespace: The resource family (e.g., 'language').

        Returns:
            A flat dictionary of keys to strings. Empty if the resource is absent.
        """
        ...


class FileHandlerProtocol(Protocol):
    """
    Protocol for file handlers that can parse specific formats.
    """

    def match(self, path: Path) -> bool:
        """Returns True if this handler can process the given file."""
        ...

    def load(self, path: Path) -> Dict[str, Any]:
        """Parses the file and returns a dictionary."""
        ...


class TranslatorProtocol(Protocol):
    def get(
        self,
        key: str,
        replace: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str: ...
