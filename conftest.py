import json
from pathlib import Path
from textwrap import dedent
from typing import Any, Dict, List

import pytest
import tomli_w
import yaml


class WorkspaceFactory:
    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files_to_create: List[Dict[str, Any]] = []
        self._pyproject_data: Dict[str, Any] = {}

    def with_config(self, slimbase_config: Dict[str, Any]) -> "WorkspaceFactory":
        tool = self._pyproject_data.setdefault("tool", {})
        tool["slimbase"] = slimbase_config
        return self

    def with_source(self, path: str, content: str) -> "WorkspaceFactory":
        self._files_to_create.append(
            {"path": path, "content": dedent(content), "format": "raw"}
        )
        return self

    def with_translations(self, path: str, data: Dict[str, Any]) -> "WorkspaceFactory":
        fmt = "json" if path.endswith(".json") else "yaml"
        self._files_to_create.append({"path": path, "content": data, "format": fmt})
        return self

    def build(self) -> Path:
        # 1. Finalize pyproject.toml if data was added
        if self._pyproject_data:
            self._files_to_create.append(
                {
                    "path": "pyproject.toml",
                    "content": self._pyproject_data,
                    "format": "toml",
                }
            )

        # 2. Write all files
        for file_spec in self._files_to_create:
            output_path = self.root_path / file_spec["path"]
            output_path.parent.mkdir(parents=True, exist_ok=True)

            fmt = file_spec["format"]
            content = file_spec["content"]

            if fmt == "toml":
                with output_path.open("wb") as f:
                    tomli_w.dump(content, f)
            elif fmt == "json":
                output_path.write_text(
                    json.dumps(content, ensure_ascii=False, indent=2), encoding="utf-8"
                )
            elif fmt == "yaml":
                output_path.write_text(
                    yaml.dump(content, indent=2, allow_unicode=True), encoding="utf-8"
                )
            else:  # raw
                output_path.write_text(content, encoding="utf-8")

        return self.root_path


@pytest.fixture
def workspace_factory(tmp_path, monkeypatch):
    # Use a fixture to ensure a clean workspace and chdir for each test
    factory = WorkspaceFactory(tmp_path)
    monkeypatch.chdir(tmp_path)
    return factory
