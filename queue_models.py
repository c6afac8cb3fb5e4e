from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class LoadOrder(Enum):
    """
    初期化時のシーケンス読み込み順

    OLDEST_FIRST: items[0] が最初に dequeue される
    NEWEST_FIRST: 末尾から読み込む（旧実装の逆順ロード）
    """
    OLDEST_FIRST = "OLDEST_FIRST"
    NEWEST_FIRST = "NEWEST_FIRST"


class MergeMode(Enum):
    """
    enqueue_all に LinkedQueue を渡したときの結合方式

    TRANSFER: ノード列をそのまま繋ぎ替える O(1)。結合元は空になる
    COPY    : 値を新しいノードに複製する O(n)。結合元はそのまま
    """
    TRANSFER = "TRANSFER"
    COPY = "COPY"


# -------------------------
# 例外
# -------------------------
class QueueError(Exception):
    pass


class CapacityExceeded(QueueError, OverflowError):
    """上限ノード数を超える enqueue"""


class EmptyContainer(QueueError, IndexError):
    """空の Queue に対する dequeue / peek"""


class InvalidArgumentFormat(QueueError, TypeError):
    """enqueue_all に LinkedQueue でもシーケンスでもない値が渡された"""
