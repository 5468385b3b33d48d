import random
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from avl_profiler.config import get_config
from avl_profiler.generator import parse_query_length
from avl_profiler.profiler import OPERATIONS, run_profile

COMPLETED_MESSAGE = "Profiling completed. Check console for memory and time usage."


def ok(data=None, **extra):
    payload = {"ok": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)

def err(message: str, status: int = 400, **extra):
    payload = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    cfg = get_config()
    if config:
        cfg.update(config)

    app = Flask(__name__)
    app.config["PROFILER"] = cfg

    def handle_profile_request(operation: str):
        try:
            length = parse_query_length(request.args.get("length"), cfg["default_query_length"])
        except ValueError as e:
            return err(str(e))

        if length > cfg["max_query_length"]:
            return err(f"length must be at most {cfg['max_query_length']}")

        rng = random.Random(cfg["seed"]) if cfg["seed"] is not None else None
        result = run_profile(operation, length, rng)
        return ok(result.to_dict(), message=COMPLETED_MESSAGE)

    @app.get("/profile/insert")
    def profile_insert():
        return handle_profile_request("insert")

    @app.get("/profile/delete")
    def profile_delete():
        return handle_profile_request("delete")

    @app.get("/profile/search")
    def profile_search():
        return handle_profile_request("search")

    @app.get("/api/profile/<operation>")
    def api_profile(operation: str):
        if operation not in OPERATIONS:
            return err(f"unknown operation '{operation}'", 404, operations=sorted(OPERATIONS))
        return handle_profile_request(operation)

    @app.get("/api/status")
    def api_status():
        return ok({
            "operations": sorted(OPERATIONS),
            "default_query_length": cfg["default_query_length"],
            "max_query_length": cfg["max_query_length"],
            "seeded": cfg["seed"] is not None,
        })

    return app


app = create_app()

if __name__ == "__main__":
    cfg = app.config["PROFILER"]
    print(f"[startup] Server is running on http://{cfg['host']}:{cfg['port']}")
    app.run(host=cfg["host"], port=cfg["port"], debug=cfg["debug"], use_reloader=False)
