import random
import sys
import time
from typing import List

from avl_profiler.config import get_config
from avl_profiler.generator import parse_query_length
from avl_profiler.profiler import OPERATIONS, ProfileResult, run_profile


def run_profile_smoke_test(length: int, seed=None) -> List[ProfileResult]:
    print("--- AVL profiler smoke test ---")

    start_time = time.perf_counter()
    results = []
    for name in OPERATIONS:
        rng = random.Random(seed) if seed is not None else None
        results.append(run_profile(name, length, rng))
    end_time = time.perf_counter()

    print(f"Profiled {len(results)} operations over {length:,} keys in {end_time - start_time:.2f}s")
    for result in results:
        print(f"  - {result.operation}: {result.elapsed_ms:.2f} ms, {result.memory_delta_mb:.3f} MB")
    return results


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    cfg = get_config()
    try:
        n = parse_query_length(argv[0] if argv else None, cfg["default_query_length"])
    except ValueError as e:
        sys.exit(f"error: {e}")
    return run_profile_smoke_test(n, cfg["seed"])


if __name__ == "__main__":
    main()
