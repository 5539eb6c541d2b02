"""Flask application factory for the simulator's JSON API.

The ``create_app`` function returns a Flask app with three endpoints:

- ``GET /api/config`` — the default scheduler config.
- ``GET /api/sample`` — the built-in sample population as records.
- ``POST /api/schedule`` — run a simulation and return its log.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from cfs_sim.config import SchedulerConfig
from cfs_sim.logging import Logger, LogLevel
from cfs_sim.population import process_to_record, processes_from_records, sample_processes
from cfs_sim.process.scheduler import CFSScheduler

_HTTP_BAD_REQUEST = 400


def _error(message: str) -> tuple[Response, int]:
    return jsonify({"error": message}), _HTTP_BAD_REQUEST


def create_app(config: SchedulerConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Default scheduler config for requests that send none.

    Returns:
        A configured Flask application ready to serve.

    """
    default_config = config if config is not None else SchedulerConfig()
    app = Flask(__name__)

    @app.route("/api/config")
    def get_config() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the default scheduler config."""
        return jsonify(default_config.as_dict())

    @app.route("/api/sample")
    def sample() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the sample population as process records."""
        return jsonify({"processes": [process_to_record(p) for p in sample_processes()]})

    @app.route("/api/schedule", methods=["POST"])
    def schedule() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run one simulation.

        Expects JSON body: ``{"processes": [...], "config": {...}}``.
        Both keys are optional; the sample population and the app's
        default config fill in for missing ones.

        Returns:
            JSON with ``log``, ``summary``, ``processes`` and ``events``.

        """
        data: Any = request.get_json(silent=True)
        if not isinstance(data, dict):
            return _error("Request body must be a JSON object")

        raw_config = data.get("config")
        raw_processes = data.get("processes")
        if raw_config is not None and not isinstance(raw_config, dict):
            return _error("'config' must be an object")
        if raw_processes is not None and not isinstance(raw_processes, list):
            return _error("'processes' must be a list")

        try:
            run_config = (
                default_config
                if raw_config is None
                else SchedulerConfig.from_mapping({**default_config.as_dict(), **raw_config})
            )
            processes = (
                sample_processes() if raw_processes is None else processes_from_records(raw_processes)
            )
        except (TypeError, ValueError) as e:
            return _error(str(e))

        logger = Logger(min_level=LogLevel.INFO)
        log = CFSScheduler(config=run_config, logger=logger).schedule(processes)

        return jsonify(
            {
                "config": run_config.as_dict(),
                "log": [entry.as_dict() for entry in log],
                "summary": {
                    "processes": len(processes),
                    "slices": len(log),
                    "makespan": log.makespan,
                    "dispatch_counts": {str(pid): n for pid, n in log.dispatch_counts().items()},
                },
                "processes": [process_to_record(p, progress=True) for p in processes],
                "events": [str(e) for e in logger.entries],
            },
        )

    return app


def main() -> None:
    """Run the development server.

    This is the ``cfs-sim-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
