"""
Bracket-notation form encoding for the Stripe API.

Stripe accepts nested parameters as ``parent[child]=value`` and
``parent[child][0]=value``. The input is lifted into a small tree of
``ObjectNode`` / ``ArrayNode`` / ``Scalar`` nodes and each node knows how to
emit its own key/value pairs, so the walk itself never inspects raw types.
"""
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Iterator
from urllib.parse import urlencode


Pair = tuple[str, str]


class Node(ABC):
    @abstractmethod
    def pairs(self, key: str) -> Iterator[Pair]:
        """Yields the flattened form pairs for this node under ``key``."""


class Scalar(Node):
    def __init__(self, value: Any):
        self.value = value

    def render(self) -> str:
        value = self.value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    def pairs(self, key: str) -> Iterator[Pair]:
        yield key, self.render()


class Missing(Node):
    # None leaves are dropped from the output
    def pairs(self, key: str) -> Iterator[Pair]:
        return iter(())


class ObjectNode(Node):
    def __init__(self, children: dict[str, Node]):
        self.children = children

    def pairs(self, key: str = "") -> Iterator[Pair]:
        for name, child in self.children.items():
            child_key = f"{key}[{name}]" if key else name
            yield from child.pairs(child_key)


class ArrayNode(Node):
    def __init__(self, items: list[Node]):
        self.items = items

    def pairs(self, key: str) -> Iterator[Pair]:
        for index, item in enumerate(self.items):
            yield from item.pairs(f"{key}[{index}]")


def to_node(value: Any) -> Node:
    if value is None:
        return Missing()
    if isinstance(value, Mapping):
        return ObjectNode({str(k): to_node(v) for k, v in value.items()})
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return ArrayNode([to_node(item) for item in value])
    return Scalar(value)


def encode_pairs(data: Mapping[str, Any]) -> list[Pair]:
    if not isinstance(data, Mapping):
        raise TypeError(f"Form data must be a mapping, got {type(data).__name__}")
    return list(to_node(data).pairs())


def encode_form(data: Mapping[str, Any]) -> str:
    """Encode a nested mapping as an x-www-form-urlencoded string."""
    return urlencode(encode_pairs(data))
