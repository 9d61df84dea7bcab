import json
import logging
from pathlib import Path
from typing import Any, Dict

from slimbase.protocols import FileHandlerProtocol

log = logging.getLogger(__name__)


class JsonHandler(FileHandlerProtocol):
    def match(self, path: Path) -> bool:
        return path.suffix.lower() == ".json"

    def load(self, path: Path) -> Dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            log.warning(f"Could not load translation file {path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}
