from typing import Any, Dict

from slimbase.protocols import FileLoaderProtocol
from .fs_loader import flatten


class MemoryLoader(FileLoaderProtocol):
    """
    Serves translations from a `{locale: {file: {key: value}}}` dictionary.

    Nested mappings are flattened to dotted keys, as FileSystemLoader does.
    The namespace argument is accepted for protocol compatibility and ignored.
    """

    def __init__(self, data: Dict[str, Dict[str, Dict[str, Any]]]):
        self._data = data

    def load(self, locale: str, file: str, namespace: str) -> Dict[str, str]:
        # flatten() builds a new dict, so later edits to the source are not observed.
        return flatten(self._data.get(locale, {}).get(file, {}))
