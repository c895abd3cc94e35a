# This file makes this a Python package

from .config import MazePathConfig, init_config, get_config

__all__ = [
    "MazePathConfig",
    "init_config",
    "get_config",
]
