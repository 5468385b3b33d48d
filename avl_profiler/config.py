import os

from avl_profiler.generator import DEFAULT_QUERY_LENGTH


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_config():

    return {
        "host": os.environ.get("AVL_PROFILER_HOST", "127.0.0.1"),
        "port": _env_int("AVL_PROFILER_PORT", 8080),

        "debug": os.environ.get("AVL_PROFILER_DEBUG", "").lower() in ("1", "true", "yes"),

        # batch size used when the request has no usable `length`
        "default_query_length": _env_int("AVL_PROFILER_DEFAULT_LENGTH", DEFAULT_QUERY_LENGTH),

        # upper bound on a single batch; larger requests are rejected
        "max_query_length": _env_int("AVL_PROFILER_MAX_LENGTH", 5000000),

        # fixed seed makes generated batches reproducible, None keeps them random
        "seed": _env_int("AVL_PROFILER_SEED", None),
    }
