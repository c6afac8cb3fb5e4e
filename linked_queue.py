from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any, Generic, Iterator, List, Optional, TypeVar, Union

from queue_models import (
    CapacityExceeded,
    EmptyContainer,
    InvalidArgumentFormat,
    LoadOrder,
    MergeMode,
    _Node,
)

T = TypeVar("T")

MAX_NODES = 4_294_967_295

logger = logging.getLogger(__name__)


def _is_plain_sequence(obj: Any) -> bool:
    # 文字列・バイト列は1要素ずつ展開しない
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


class LinkedQueue(Generic[T]):
    """
    単方向リンクで実装した Queue（FIFO）
    enqueue/dequeue/len: O(1)
    enqueue_all（LinkedQueue 同士の結合）: O(1)
    to_list/to_text/to_json: O(n)

    スレッドセーフではない。複数スレッドから使う場合は呼び出し側でロックすること。
    """

    def __init__(
        self,
        items: Sequence[T] = (),
        *,
        order: Union[LoadOrder, str] = LoadOrder.OLDEST_FIRST,
        max_nodes: int = MAX_NODES,
    ) -> None:
        if not 1 <= max_nodes <= MAX_NODES:
            raise ValueError(f"max_nodes must be between 1 and {MAX_NODES}")
        # 文字列値も受け付ける。不正な値は ValueError
        order = LoadOrder(order)
        self._oldest: Optional[_Node[T]] = None
        self._newest: Optional[_Node[T]] = None
        self._length: int = 0
        self._max_nodes: int = max_nodes

        if not _is_plain_sequence(items):
            raise InvalidArgumentFormat(
                "Initial items must be an ordered sequence of values."
            )
        if order is LoadOrder.NEWEST_FIRST:
            self.enqueue(*reversed(items))
        else:
            self.enqueue(*items)

    # -------------------------
    # サイズ
    # -------------------------
    @property
    def length(self) -> int:
        return self._length

    @property
    def max_nodes(self) -> int:
        return self._max_nodes

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def size(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    # -------------------------
    # 追加
    # -------------------------
    def enqueue(self, *values: T) -> None:
        """
        末尾に追加。上限チェックは呼び出し1回につき1度だけ、追加前に行う。
        上限を超える場合は1件も追加しない。
        """
        if self._length >= self._max_nodes or self._length + len(values) > self._max_nodes:
            raise CapacityExceeded(f"Queue length cannot exceed {self._max_nodes} nodes.")

        for value in values:
            node = _Node(data=value)
            if self._newest is None:
                self._oldest = node
            else:
                self._newest.next = node
            self._newest = node
            self._length += 1

    def enqueue_all(self, *items: Any, mode: Union[MergeMode, str] = MergeMode.TRANSFER) -> None:
        """
        LinkedQueue またはシーケンスを左から順に末尾へ追加する。

        LinkedQueue は mode に従って結合する（TRANSFER なら結合元は空になる）。
        途中で不正な引数に当たった場合、それ以前の引数の追加は取り消さない。
        """
        mode = MergeMode(mode)
        for item in items:
            if isinstance(item, LinkedQueue):
                self._merge(item, mode)
                continue
            if _is_plain_sequence(item):
                self.enqueue(*item)
                continue
            raise InvalidArgumentFormat(
                "Invalid queue format. Queues must be an instance of "
                f"`LinkedQueue` or an ordered sequence of values, got {type(item).__name__}."
            )

    def _merge(self, other: LinkedQueue[T], mode: MergeMode) -> None:
        if other._length == 0:
            return
        if mode is MergeMode.TRANSFER and other is self:
            raise InvalidArgumentFormat("A queue cannot be transferred into itself.")
        if self._length + other._length > self._max_nodes:
            raise CapacityExceeded(f"Queue length cannot exceed {self._max_nodes} nodes.")

        if mode is MergeMode.COPY:
            # 自分自身のコピーに備えて先にスナップショットを取る
            self.enqueue(*other.to_list())
            logger.debug("copied %d nodes into queue (length=%d)", other._length, self._length)
            return

        moved = other._length
        if self._newest is None:
            self._oldest = other._oldest
        else:
            self._newest.next = other._oldest
        self._newest = other._newest
        self._length += moved

        # 所有権の移動。結合元からはノード列を切り離す
        other.clear()
        logger.debug("transferred %d nodes into queue (length=%d)", moved, self._length)

    # -------------------------
    # 取り出し
    # -------------------------
    def dequeue(self) -> T:
        node = self._oldest
        if node is None:
            raise EmptyContainer("Cannot perform dequeue on an empty queue.")
        self._oldest = node.next
        if node is self._newest:
            self._newest = None
        self._length -= 1
        node.next = None
        return node.data

    def peek(self) -> T:
        if self._oldest is None:
            raise EmptyContainer("Cannot peek into an empty queue.")
        return self._oldest.data

    def clear(self) -> None:
        self._oldest = None
        self._newest = None
        self._length = 0

    # -------------------------
    # 変換
    # -------------------------
    def __iter__(self) -> Iterator[T]:
        """古い順に値を返す。走査中に Queue を変更してはならない（dequeue するとそこで止まる）。"""
        node = self._oldest
        while node is not None:
            yield node.data
            node = node.next

    def to_list(self) -> List[T]:
        """古い順の値リスト（ノードではなく値を返す）"""
        return list(self)

    def to_text(self) -> str:
        return ",".join(str(v) for v in self)

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_list(), **kwargs)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
