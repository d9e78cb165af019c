from __future__ import annotations

import json
import pathlib
import time

LOG_PATH = pathlib.Path("logs") / "ticks.log"


def log_tick(
    tick: int,
    tick_seconds: float,
    render_seconds: float,
    population: int,
    *,
    log_file: pathlib.Path = LOG_PATH,
) -> None:
    """
    Record one generation of a run as a JSON line:

        {"ts": "2024-05-01T12:00:00Z", "tick": 12, "tick_seconds": 0.0031,
         "render_seconds": 0.0008, "population": 211}

    `tick` is the world's generation after the step and `population` its live
    cell count. Lines from successive runs accumulate in the same file.
    """
    record = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "tick": tick,
        "tick_seconds": tick_seconds,
        "render_seconds": render_seconds,
        "population": population,
    }
    log_file.parent.mkdir(parents=True, exist_ok=True)
    with log_file.open("a", encoding="utf-8") as fp:
        fp.write(json.dumps(record) + "\n")
