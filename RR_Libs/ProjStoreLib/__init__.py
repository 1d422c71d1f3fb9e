"""
ProjStoreLib - Pipeline node registry

This module exposes the registry that maps node types to their
executors for Room Recolor pipelines.
"""

from RR_Libs.ProjStoreLib.node_executors import (
    NodeExecutorRegistry,
    NodeTypeInfo,
    get_default_registry,
    register_default_executors,
)

__all__ = [
    "NodeExecutorRegistry",
    "NodeTypeInfo",
    "get_default_registry",
    "register_default_executors",
]
