import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from slimbase.protocols import FileHandlerProtocol, FileLoaderProtocol
from .json_handler import JsonHandler
from .yaml_handler import YamlHandler

log = logging.getLogger(__name__)


def flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
    items: Dict[str, str] = {}
    for k, v in data.items():
        new_key = f"{prefix}.{k}" if prefix else str(k)
        if isinstance(v, dict):
            items.update(flatten(v, new_key))
        elif v is not None:
            items[new_key] = str(v)
    return items


class FileSystemLoader(FileLoaderProtocol):
    """
    Loads `<root>/<namespace>/<locale>/<file>.<ext>` from one or more roots.

    Roots are read in order and later roots override earlier ones. Within a
    root, handlers are tried in order against the files named `<file>.*`.
    """

    def __init__(
        self,
        roots: Optional[List[Path]] = None,
        handlers: Optional[List[FileHandlerProtocol]] = None,
    ):
        self.handlers = handlers or [JsonHandler(), YamlHandler()]
        self.roots = (
            [Path(r) for r in roots] if roots else [self._find_project_root()]
        )

    def _find_project_root(self, start_dir: Optional[Path] = None) -> Path:
        current_dir = (start_dir or Path.cwd()).resolve()
        # Stop at filesystem root
        while current_dir.parent != current_dir:
            if (current_dir / "pyproject.toml").is_file() or (
                current_dir / ".git"
            ).is_dir():
                return current_dir
            current_dir = current_dir.parent
        return start_dir or Path.cwd()

    def add_root(self, path: Path):
        path = Path(path)
        if path not in self.roots:
            self.roots.insert(0, path)

    def locate(
        self, root: Path, locale: str, file: str, namespace: str
    ) -> Optional[Path]:
        directory = root / namespace / locale
        if not directory.is_dir():
            return None

        candidates = [p for p in sorted(directory.iterdir()) if p.stem == file]
        # Handler order decides between e.g. messages.json and messages.yaml
        for handler in self.handlers:
            for candidate in candidates:
                if candidate.is_file() and handler.match(candidate):
                    return candidate
        return None

    def load(self, locale: str, file: str, namespace: str) -> Dict[str, str]:
        merged_registry: Dict[str, str] = {}

        for root in self.roots:
            path = self.locate(root, locale, file, namespace)
            if path is None:
                continue

            handler = next(h for h in self.handlers if h.match(path))
            merged_registry.update(flatten(handler.load(path)))

        if not merged_registry:
            log.debug(
                f"No '{namespace}/{locale}/{file}' resources under {self.roots}"
            )
        return merged_registry
