from typing import Optional, Union
import numbers

Number = Union[int, float, numbers.Real]


class Node:
    def __init__(
        self,
        key: Number,
        left: Optional['Node'] = None,
        right: Optional['Node'] = None,
    ) -> None:
        self.key: Number = key
        self.left: Optional[Node] = left
        self.right: Optional[Node] = right

    def __repr__(self) -> str:
        return f"Node({self.key})"
