"""A minimal singly linked list whose nodes own a copy of their content."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator, Sized
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """One list node holding content, its size and a link to the next node."""

    content: Any = None
    content_size: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def lstnew(content: Any) -> ListNode:
    """Return a new node holding a copy of ``content``.

    If ``content`` is ``None``, the node holds nothing and has size 0.
    Otherwise ``content`` must be sized.
    """
    if content is None:
        return ListNode()
    if not isinstance(content, Sized):
        raise TypeError("content must be sized")
    return ListNode(copy.copy(content), len(content))


def lstadd(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Put ``node`` in front of ``head`` and return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def lstdelone(
    node: Optional[ListNode], delete: Optional[Callable[[Any, int], Any]]
) -> Optional[ListNode]:
    """Pass a node's content to ``delete``; return what should replace the node.

    Returns ``None`` once the node is released. If there is no callback,
    the node is returned unchanged.
    """
    if node is None or delete is None:
        return node
    delete(node.content, node.content_size)
    node.content = None
    node.content_size = 0
    return None


def lstdel(
    head: Optional[ListNode], delete: Optional[Callable[[Any, int], Any]]
) -> Optional[ListNode]:
    """Release every node from the last to the first; return the new head."""
    if head is None or delete is None:
        return head
    for node in reversed(list(head)):
        lstdelone(node, delete)
        node.next = None
    return None


def lstiter(head: Optional[ListNode], f: Callable[[ListNode], Any]) -> None:
    """Call ``f`` on every node in order."""
    if head is None:
        return
    for node in head:
        f(node)


def lstmap(
    head: Optional[ListNode], f: Optional[Callable[[ListNode], ListNode]]
) -> Optional[ListNode]:
    """Build a new list from copies of what ``f`` returns for each node."""
    if head is None or f is None:
        return None
    first: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for node in head:
        produced = f(node)
        content = None if produced.content is None else copy.copy(produced.content)
        fresh = ListNode(content, produced.content_size)
        if tail is None:
            first = fresh
        else:
            tail.next = fresh
        tail = fresh
    return first