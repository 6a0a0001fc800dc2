#!/usr/bin/env python3
"""
Terminal Game of Life Runner

Builds a square universe, reseeds it, then repeatedly renders and
advances it. The universe is reseeded again on a fixed generation
interval so the board never settles into a dead or static state.
"""

import sys
import os
import time
import logging

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from lifegrid import bindings
from lifegrid.core.seeding import ReseedConfig, DEFAULT_THRESHOLD

# 10 seconds at 60 frames per second
DEFAULT_RESEED_EVERY = 600


def clear_screen():
    """Move the cursor home and clear the terminal."""
    sys.stdout.write("\x1b[H\x1b[2J")


def run_universe(size=32, generations=None, reseed_every=DEFAULT_RESEED_EVERY,
                 delay=1 / 60, seed=None, threshold=DEFAULT_THRESHOLD, stream=None):
    """Drive a universe through the host bindings and return run metrics."""
    stream = stream or sys.stdout

    universe = bindings.new(size, seed=seed)
    universe.reseed_config = ReseedConfig(threshold=threshold)
    bindings.randomize(universe)

    logger.info(f"=== {bindings.TITLE.upper()} ===")
    logger.info(f"Universe: {size}x{size}, reseed every {reseed_every} generations")
    logger.info(f"Initial live cells: {universe.count_alive()}")

    reseeds = 1
    frame = 0
    while generations is None or frame < generations:
        if stream is sys.stdout:
            clear_screen()
        stream.write(bindings.render(universe))
        stream.flush()

        bindings.tick(universe)
        frame += 1

        if reseed_every and frame % reseed_every == 0:
            bindings.randomize(universe)
            reseeds += 1
            logger.debug(f"Reseeded at generation {universe.generation}")

        if delay:
            time.sleep(delay)

    results = {
        "size": size,
        "generations": universe.generation,
        "reseeds": reseeds,
        "final_live_count": universe.count_alive(),
    }
    logger.info(f"Finished after {results['generations']} generations, "
                f"{results['final_live_count']} alive")
    return results


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Game of Life terminal runner")
    parser.add_argument("--size", type=int, default=32, help="Universe size (square)")
    parser.add_argument("--generations", type=int, default=None, help="Stop after this many generations")
    parser.add_argument("--reseed-every", type=int, default=DEFAULT_RESEED_EVERY,
                        help="Reseed interval in generations (0 disables)")
    parser.add_argument("--delay", type=float, default=1 / 60, help="Seconds between frames")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs")
    parser.add_argument("--threshold", type=int, default=DEFAULT_THRESHOLD,
                        help="Reseed draws above this value (0-99) force a cell alive")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        run_universe(
            size=args.size,
            generations=args.generations,
            reseed_every=args.reseed_every,
            delay=args.delay,
            seed=args.seed,
            threshold=args.threshold
        )
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.error(f"Run failed: {e}")
        sys.exit(1)
