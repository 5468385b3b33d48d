"""
Time and heap profiling of tree operations over a batch of keys.

Each profile applies one operation to every value in sequence and reports
the wall-clock duration and the change in traced Python heap usage.
Timing runs untraced; the heap delta comes from a traced replica of the
tree, so tracing cost never shows up in the reported time.
"""

import gc
import random
import time
import tracemalloc
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Iterable, List, Optional

from avl_profiler.indexing import BalancedBinarySearchTree, Node
from avl_profiler.generator import generate_test_data

TreeOperation = Callable[[BalancedBinarySearchTree, int], Any]


@dataclass
class ProfileResult:
    operation: str
    count: int
    elapsed_ms: float
    memory_delta_mb: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ------------------ Profiling core ------------------
def _replicate(node: Optional[Node]) -> Optional[Node]:
    """Return a node-for-node clone of the subtree rooted at node."""
    if node is None:
        return None
    clone = Node(node.value)
    clone.height = node.height
    clone.left = _replicate(node.left)
    clone.right = _replicate(node.right)
    return clone


def _measure_heap_delta(operation: TreeOperation, tree: BalancedBinarySearchTree,
                        values: List[int]) -> int:
    """
    Run the batch on a replica of tree with allocation tracing on and
    return the change in traced bytes.

    The replica is built while tracing, so nodes freed by the batch are
    counted as well as nodes it allocates.
    """
    started_tracing = not tracemalloc.is_tracing()
    if started_tracing:
        tracemalloc.start()
    try:
        replica = BalancedBinarySearchTree()
        replica.root = _replicate(tree.root)
        gc.collect()
        start_memory, _ = tracemalloc.get_traced_memory()

        for value in values:
            operation(replica, value)

        gc.collect()
        end_memory, _ = tracemalloc.get_traced_memory()
        del replica
    finally:
        if started_tracing:
            tracemalloc.stop()
    return end_memory - start_memory


def profile_operation(operation: TreeOperation, tree: BalancedBinarySearchTree,
                      values: List[int], operation_name: str) -> ProfileResult:
    """Apply operation(tree, value) for every value and measure time and heap delta."""
    # the batch is deterministic for a given tree and key sequence, so the
    # traced replica sees the same allocations as the timed run below
    memory_delta = _measure_heap_delta(operation, tree, values)

    gc.collect()
    start_time = time.perf_counter()

    for value in values:
        operation(tree, value)

    end_time = time.perf_counter()

    result = ProfileResult(
        operation=operation_name,
        count=len(values),
        elapsed_ms=(end_time - start_time) * 1000,
        memory_delta_mb=memory_delta / 1024 / 1024,
    )
    print(f"{operation_name} Memory used: {result.memory_delta_mb} MB")
    print(f"{operation_name} Time taken: {result.elapsed_ms} ms")
    return result


def profile_insert(tree: BalancedBinarySearchTree, values: List[int]) -> ProfileResult:
    return profile_operation(BalancedBinarySearchTree.add, tree, values, "Insert")


def profile_delete(tree: BalancedBinarySearchTree, values: List[int]) -> ProfileResult:
    return profile_operation(BalancedBinarySearchTree.discard, tree, values, "Delete")


def profile_search(tree: BalancedBinarySearchTree, values: List[int]) -> ProfileResult:
    return profile_operation(BalancedBinarySearchTree.contains, tree, values, "Search")


OPERATIONS: Dict[str, Callable[[BalancedBinarySearchTree, List[int]], ProfileResult]] = {
    "insert": profile_insert,
    "delete": profile_delete,
    "search": profile_search,
}

# operations that need a populated tree before timing starts
NEEDS_PREFILL = ("delete", "search")


# ------------------ Batch runner ------------------
def build_tree(values: Iterable[int]) -> BalancedBinarySearchTree:
    """Return a new tree holding every value (duplicates collapse)."""
    tree = BalancedBinarySearchTree()
    for value in values:
        tree.add(value)
    return tree


def run_profile(operation: str, length: int, rng: Optional[random.Random] = None) -> ProfileResult:
    """Generate `length` keys and profile `operation` over them."""
    profile = OPERATIONS.get(operation)
    if profile is None:
        raise ValueError(f"unknown operation: {operation!r} (expected one of {sorted(OPERATIONS)})")

    test_data = generate_test_data(length, rng)
    if operation in NEEDS_PREFILL:
        tree = build_tree(test_data)
    else:
        tree = BalancedBinarySearchTree()

    print(f"[profile] {operation} over {length:,} keys")
    return profile(tree, test_data)
