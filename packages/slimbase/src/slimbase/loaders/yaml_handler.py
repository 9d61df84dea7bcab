import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from slimbase.protocols import FileHandlerProtocol

log = logging.getLogger(__name__)


class YamlHandler(FileHandlerProtocol):
    def match(self, path: Path) -> bool:
        return path.suffix.lower() in (".yaml", ".yml")

    def load(self, path: Path) -> Dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            log.warning(f"Could not load translation file {path}: {e}")
            return {}

        if not isinstance(content, dict):
            return {}
        return {str(k): v for k, v in content.items() if v is not None}
