#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Solar-system demo on Orrery3D.

* Sun, Earth and the Halley rock riding on Earth's orbit.
* Left drag rotates, right drag pans, the wheel zooms; the camera keeps
  following Earth.
* --frames N stops after N frames, --seed S fixes the random layout.
"""

from __future__ import annotations

import argparse

import numpy as np

from orrery3d.engine import Engine
from orrery3d.solar.animation import stop_after
from orrery3d.utils import logger


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Animated solar-system scene")
    parser.add_argument("--config", default="config.json", help="settings file")
    parser.add_argument("--frames", type=int, default=None,
                        help="quit after this many frames")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for orbit phases and the rock shape")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    rng = np.random.default_rng(args.seed) if args.seed is not None else None
    engine = Engine(config_path=args.config, rng=rng)

    should_stop = None
    if args.frames is not None:
        limit = stop_after(args.frames)

        def should_stop():
            return engine.window.should_close() or limit()

    engine.run(should_stop)


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:
        logger.error(f"[solar_system] Fatal error: {exc}")
        raise
