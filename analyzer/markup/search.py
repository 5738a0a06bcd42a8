from dataclasses import dataclass
from typing import Optional
from .tree import Node, TagPayload, TextPayload, iter_nodes


@dataclass(frozen=True, slots=True)
class DeepestText:
    payload: TextPayload
    depth: int

    @property
    def literal(self) -> str:
        return self.payload.literal


def find_deepest_match(root: Node) -> Optional[DeepestText]:
    """
    Return the text node with the greatest depth (root = 1) and that depth.

    On a tie the first text node met in pre-order wins. ``None`` when the tree
    holds no text at all.
    """
    best: Optional[DeepestText] = None
    for node, depth in iter_nodes(root):
        payload = node.payload
        if isinstance(payload, TextPayload):
            if best is None or depth > best.depth:
                best = DeepestText(payload, depth)
        elif not isinstance(payload, TagPayload):
            raise TypeError(f"Unknown node payload: {payload!r}")
    return best


def find_deepest(root: Node) -> Optional[TextPayload]:
    match = find_deepest_match(root)
    return match.payload if match else None
