"""
Node Executors Registry.

Maps recolor node types ("Flood Fill", "Texture Blend", "Downsample") to
the functions that run them. Each entry records how many inputs the node
consumes, so a pipeline wired with too few images fails at the registry
instead of deep inside an executor.

Classes:
    NodeTypeInfo: Executor and port counts for one node type
    NodeExecutorRegistry: Registry for node executors

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_executors: Register the built-in recolor nodes
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
import logging

from RR_Libs.constants import (
    NODE_TYPE_DOWNSAMPLE,
    NODE_TYPE_FLOOD_FILL,
    NODE_TYPE_TEXTURE_BLEND,
)

logger = logging.getLogger(__name__)

# Type alias for executor function
ExecutorFunction = Callable[[Dict[str, Any], List[Any]], Any]


@dataclass(frozen=True)
class NodeTypeInfo:
    """Registered node type: its executor and the images it consumes and produces."""
    executor: ExecutorFunction
    description: str = ""
    input_count: int = 0
    output_count: int = 1


class NodeExecutorRegistry:
    """
    Registry for node type executors.

    Example:
        >>> registry = NodeExecutorRegistry()
        >>> registry.register("Flood Fill", execute_flood_fill_node, input_count=1)
        >>> filled = registry.execute("Flood Fill", node_dict, [image])
    """

    def __init__(self):
        self._node_types: Dict[str, NodeTypeInfo] = {}

    def register(
        self,
        node_type: str,
        executor: ExecutorFunction,
        description: str = "",
        input_count: int = 0,
        output_count: int = 1,
    ) -> None:
        """
        Register a node executor.

        Args:
            node_type: Unique name of the node type (e.g., "Flood Fill")
            executor: Callable accepting (node_dict, inputs)
            description: What the node does, for editors and listings
            input_count: Minimum number of input images
            output_count: Number of values the node produces

        Raises:
            ValueError: If node_type is empty, executor is not callable or
                        input_count is negative
            RuntimeError: If node_type is already registered
        """
        node_type = str(node_type).strip()
        if not node_type:
            raise ValueError("node_type cannot be empty")
        if not callable(executor):
            raise ValueError(f"executor must be callable, got {type(executor)}")
        if int(input_count) < 0:
            raise ValueError(f"input_count cannot be negative, got {input_count}")
        if node_type in self._node_types:
            raise RuntimeError(
                f"Node type '{node_type}' is already registered; unregister it before replacing"
            )

        self._node_types[node_type] = NodeTypeInfo(
            executor=executor,
            description=str(description),
            input_count=int(input_count),
            output_count=int(output_count),
        )
        logger.debug(f"Registered {node_type} ({input_count} in, {output_count} out)")

    def unregister(self, node_type: str) -> bool:
        """Remove a node type. Returns False if it was not registered."""
        removed = self._node_types.pop(str(node_type).strip(), None)
        if removed is not None:
            logger.debug(f"Unregistered {str(node_type).strip()}")
        return removed is not None

    def get_node_info(self, node_type: str) -> NodeTypeInfo:
        """
        Look up a registered node type.

        Raises:
            KeyError: If node_type is not registered
        """
        node_type = str(node_type).strip()
        try:
            return self._node_types[node_type]
        except KeyError:
            available = ", ".join(self.list_node_types()) or "none"
            raise KeyError(
                f"No executor registered for node type '{node_type}'. "
                f"Available types: {available}"
            ) from None

    def get_executor(self, node_type: str) -> ExecutorFunction:
        return self.get_node_info(node_type).executor

    def has_executor(self, node_type: str) -> bool:
        return str(node_type).strip() in self._node_types

    def execute(
        self,
        node_type: str,
        node_dict: Dict[str, Any],
        inputs: List[Any],
    ) -> Any:
        """
        Run a node type's executor on node_dict and inputs.

        Raises:
            KeyError: If node_type is not registered
            ValueError: If fewer inputs are given than the node consumes
        """
        info = self.get_node_info(node_type)
        if len(inputs) < info.input_count:
            raise ValueError(
                f"{str(node_type).strip()} node needs {info.input_count} input(s), "
                f"got {len(inputs)}"
            )
        return info.executor(node_dict, inputs)

    def list_node_types(self) -> List[str]:
        return sorted(self._node_types)

    def clear(self) -> None:
        """Forget every registered node type."""
        self._node_types.clear()
        logger.warning("Node executor registry cleared")


# Global singleton registry
_default_registry: Optional[NodeExecutorRegistry] = None


def get_default_registry() -> NodeExecutorRegistry:
    """Get the global registry, creating it with the built-in nodes on first use."""
    global _default_registry

    if _default_registry is None:
        _default_registry = NodeExecutorRegistry()
        register_default_executors(_default_registry)

    return _default_registry


def register_default_executors(registry: NodeExecutorRegistry) -> None:
    """Register the Flood Fill, Texture Blend and Downsample nodes."""
    from RR_Libs.NodesLib.flood_fill_node import execute_flood_fill_node
    from RR_Libs.NodesLib.texture_blend_node import execute_texture_blend_node
    from RR_Libs.NodesLib.downsample_node import execute_downsample_node

    registry.register(
        NODE_TYPE_FLOOD_FILL,
        execute_flood_fill_node,
        description="Fill the connected region around a seed pixel with a flat color",
        input_count=1,
        output_count=2,
    )
    registry.register(
        NODE_TYPE_TEXTURE_BLEND,
        execute_texture_blend_node,
        description="Blend a filled image over its original to keep texture",
        input_count=2,
    )
    registry.register(
        NODE_TYPE_DOWNSAMPLE,
        execute_downsample_node,
        description="Bound the largest side of an image",
        input_count=1,
    )

    logger.info("Registered default node executors")
