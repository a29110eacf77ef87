# dsakit

Small, readable implementations of classic data structures and array
algorithms: searching, reversing and finding extremes in sequences, a
bounded stack, binary trees built from preorder listings, and a singly
linked list.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Arrays

```python
from dsakit.arrays import linear_search, reverse_in_place, smallest_and_largest

values = [5, 15, 1, 5, -15, 24]
linear_search(values, -15)      # 4; -1 when the value is absent
smallest_and_largest(values)    # ((-15, 4), (24, 5))
reverse_in_place(values)        # values is now [24, -15, 5, 1, 15, 5]
```

`smallest_and_largest` returns `((smallest, index), (largest, index))`,
reporting the first position when an extreme occurs more than once. It
raises `ValueError` for an empty sequence.

## Stack

```python
from dsakit.stack import BoundedStack, StackOverflow, StackUnderflow

stack = BoundedStack(4)
stack.push(10)
stack.push(20)
stack.peek()       # 20
list(stack)        # [20, 10], from top to bottom
stack.pop()        # 20
len(stack)         # 1
stack.is_full()    # False
stack.is_empty()   # False
```

Pushing onto a full stack raises `StackOverflow`; popping or peeking an
empty one raises `StackUnderflow`. Both are subclasses of `IndexError`.
A negative capacity raises `ValueError`.

## Binary trees

Trees are built from a preorder listing in which `-1` marks a missing child.
Nodes are `TreeNode` objects with `data`, `left` and `right`.

```python
from dsakit.tree import (
    build_tree, preorder, inorder, postorder,
    height, node_count, node_sum, same_tree, is_subtree,
)

root = build_tree([1, 2, -1, -1, 3, 4, -1, -1, 5, -1, -1])
preorder(root)         # [1, 2, 3, 4, 5]
inorder(root)          # [2, 1, 4, 3, 5]
postorder(root)        # [2, 4, 5, 3, 1]
height(root)           # 3
node_count(root)       # 5
node_sum(root)         # 15

branch = build_tree([3, 4, -1, -1, 5, -1, -1])
same_tree(root, branch)    # False
is_subtree(root, branch)   # True
```

`build_tree` raises `ValueError` if the listing ends before the tree is
complete; values left over afterwards are ignored.

## Linked list

```python
from dsakit.linked_list import LinkedList, merge_sorted

items = LinkedList([1, 2, 3, 4, 5])
items.render()         # "1->2->3->4->5->NULL"
items.reverse()        # now 5, 4, 3, 2, 1
items.middle()         # 3
items.search(5)        # 0, the 0-based index; -1 when absent
items.has_cycle()      # False
items.push_front(0)
items.push_back(9)
items.insert(7, 2)     # 7 ends up at index 2
items.pop_front()      # 0
items.pop_back()       # 9
len(items), list(items)
```

For an even length, `middle` returns the second of the two middle elements.
`pop_front`, `pop_back` and `middle` on an empty list raise `EmptyListError`
(a subclass of `IndexError`). `insert` raises `ValueError` for a negative
index and `IndexError` for one beyond the current length.

`merge_sorted(first, second)` splices two ascending lists into a new
ascending list. The nodes are moved rather than copied, so both inputs are
left empty; on ties the element from `first` comes first.

## What is not included

The package has no sorting routines; use Python's built-in `sorted` or
`list.sort`. It has no command-line interface.