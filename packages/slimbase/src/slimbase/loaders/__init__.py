from .fs_loader import FileSystemLoader
from .json_handler import JsonHandler
from .memory_loader import MemoryLoader
from .yaml_handler import YamlHandler

__all__ = ["FileSystemLoader", "JsonHandler", "MemoryLoader", "YamlHandler"]
