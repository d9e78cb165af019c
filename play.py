#!/usr/bin/env python
"""
play.py
-------
Run a Game of Life world in the terminal.

Each frame clears the screen and prints a report line followed by the grid:

    #12 - World tick took 0.00310 (0.00295) - Rendering took 0.00081 (0.00079)

Example
-------
python play.py --width 80 --height 24 --seed 7 --fps 10

Defaults can also come from a YAML file; explicit flags win:

    # play.yaml
    width: 120
    height: 30
    density: 0.25
    fps: 15

python play.py --config play.yaml --ticks 500
"""
from __future__ import annotations

import argparse
import pathlib
import sys
import time
from typing import Any, Dict, List, TextIO, Tuple
import yaml
from frame_rate import set_fps, wait_for_frame
from tick_log import log_tick
from world import DEFAULT_DENSITY, World

WORLD_WIDTH  = 150
WORLD_HEIGHT = 40
CLEAR_SCREEN = "\033[H\033[2J"

# key -> (accepted types, may be null)
CONFIG_TYPES: Dict[str, Tuple[Tuple[type, ...], bool]] = {
    "width":    ((int,), False),
    "height":   ((int,), False),
    "density":  ((int, float), False),
    "seed":     ((int,), True),
    "ticks":    ((int,), True),
    "fps":      ((int, float), False),
    "clear":    ((bool,), False),
    "log_file": ((str,), True),
}


def format_seconds(value: float) -> str:
    return f"{value:.5f}"


def run(
    world: World,
    *,
    ticks: int | None = None,
    fps: float = 0.0,
    clear: bool = True,
    log_file: pathlib.Path | None = None,
    out: TextIO | None = None,
) -> None:
    """
    Tick and render `world` until `ticks` generations have passed (forever if None).
    """
    out = out if out is not None else sys.stdout
    print(world.render(), file=out)

    set_fps(fps)
    total_tick   = 0.0
    total_render = 0.0
    done = 0

    while ticks is None or done < ticks:
        tick_start = time.perf_counter()
        world.tick()
        tick_time = time.perf_counter() - tick_start
        total_tick += tick_time
        avg_tick = total_tick / (done + 1)

        render_start = time.perf_counter()
        rendered = world.render()
        render_time = time.perf_counter() - render_start
        total_render += render_time
        avg_render = total_render / (done + 1)

        output = f"#{world.tick_count}"
        output += f" - World tick took {format_seconds(tick_time)} ({format_seconds(avg_tick)})"
        output += f" - Rendering took {format_seconds(render_time)} ({format_seconds(avg_render)})"
        output += f"\n{rendered}"
        if clear:
            print(CLEAR_SCREEN, file=out)
        print(output, file=out)
        out.flush()

        if log_file is not None:
            log_tick(world.tick_count, tick_time, render_time, world.population, log_file=log_file)

        done += 1
        if fps > 0:
            wait_for_frame()


def load_config(path: pathlib.Path) -> Dict[str, Any]:
    """Read driver defaults from a YAML mapping. An empty file means no overrides."""
    cfg = yaml.safe_load(path.read_text(encoding="utf-8"))
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    unknown = sorted(set(cfg) - set(CONFIG_TYPES))
    if unknown:
        raise ValueError(f"{path}: unknown config key(s): {', '.join(unknown)}")

    for key, value in cfg.items():
        types, nullable = CONFIG_TYPES[key]
        if value is None and nullable:
            continue
        # YAML booleans are ints to isinstance, only `clear` may hold one
        if (isinstance(value, bool) and bool not in types) or not isinstance(value, types):
            expected = " or ".join(t.__name__ for t in types)
            raise ValueError(f"{path}: {key} must be {expected}, got {value!r}")
    if cfg.get("log_file") is not None:
        cfg["log_file"] = pathlib.Path(cfg["log_file"])
    return cfg


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Run Conway's Game of Life in the terminal.")
    p.add_argument("--config", type=pathlib.Path, default=None, help="YAML file with default options.")
    p.add_argument("--width", type=int, default=WORLD_WIDTH, help="Number of columns.")
    p.add_argument("--height", type=int, default=WORLD_HEIGHT, help="Number of rows.")
    p.add_argument("--density", type=float, default=DEFAULT_DENSITY, help="Probability a cell starts alive.")
    p.add_argument("--seed", type=int, default=None, help="RNG seed (random start grid if omitted).")
    p.add_argument("--ticks", type=int, default=None, help="Stop after this many generations.")
    p.add_argument("--fps", type=float, default=0.0, help="Frame rate cap; 0 runs as fast as possible.")
    p.add_argument("--no-clear", dest="clear", action="store_false", help="Do not clear the terminal between frames.")
    p.add_argument("--log-file", type=pathlib.Path, default=None, help="Append per-tick JSON lines here.")
    return p


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()

    # parse only --config first so its values can become parser defaults
    pre, _ = parser.parse_known_args(argv)
    if pre.config is not None:
        try:
            parser.set_defaults(**load_config(pre.config))
        except (OSError, ValueError, yaml.YAMLError) as exc:
            parser.error(str(exc))

    args = parser.parse_args(argv)
    if args.ticks is not None and args.ticks < 0:
        parser.error("--ticks must be >= 0")

    try:
        world = World(args.width, args.height, density=args.density, seed=args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        run(world, ticks=args.ticks, fps=args.fps, clear=args.clear, log_file=args.log_file)
    except KeyboardInterrupt:
        print(f"\nStopped after {world.tick_count} ticks.", file=sys.stderr)


if __name__ == "__main__":
    main()
