import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'wilson_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wilson_maze.core.errors import MazeError

logger = logging.getLogger("wilson_maze")

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wilson Maze: uniform perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=101, help="Maze width in cells (odd)")
    gen_parser.add_argument("--height", type=int, default=101, help="Maze height in cells (odd)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--out", type=str, default="output.png", help="Output image path (one pixel per cell)")
    gen_parser.add_argument("--save", type=str, help="Also save the maze to a .maze file")
    gen_parser.add_argument("--compress", action="store_true", help="Compress the .maze file")
    gen_parser.add_argument("--seed-only", action="store_true", help="Store only the seed in the .maze file")
    gen_parser.add_argument("--record-events", type=str, help="Save generation events to binary file")
    gen_parser.add_argument("--visual", action="store_true", help="Show generation in a window")

    # Render Command
    render_parser = subparsers.add_parser("render", help="Export a saved maze to an image")
    render_parser.add_argument("input_file", help="Path to maze file")
    render_parser.add_argument("--out", type=str, default="output.png", help="Output image path")

    # Replay Command
    replay_parser = subparsers.add_parser("replay", help="Replay an event log")
    replay_parser.add_argument("event_file", help="Path to event log file")
    replay_parser.add_argument("--speed", type=int, default=1, help="Replay batches per frame")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation at several sizes")
    bench_parser.add_argument("--sizes", type=int, nargs="+", default=[51, 101, 201, 301], help="Square maze sizes (odd)")
    bench_parser.add_argument("--seed", type=int, default=42, help="Random Seed")

    return parser

def cmd_generate(args):
    from wilson_maze.core.grid import Grid
    from wilson_maze.core.events import EventWriter
    from wilson_maze.core.analysis import MazeAnalyzer
    from wilson_maze.algo.wilson import WilsonsAlgorithm
    from wilson_maze.io.image import export_image

    if args.seed_only and args.seed is None:
        raise MazeError("--seed-only needs an explicit --seed")

    logger.info(f"Generating {args.width}x{args.height} maze with Wilson's algorithm...")

    evt_writer = None
    if args.record_events:
        evt_writer = EventWriter(args.record_events)
        logger.info(f"Recording events to {args.record_events}...")

    try:
        grid = Grid(args.width, args.height, event_writer=evt_writer)
        generator = WilsonsAlgorithm(grid, seed=args.seed)

        if args.visual:
            logger.info("Visual mode enabled - Opening window...")
            from wilson_maze.viz.renderer import Renderer
            renderer = Renderer(grid, generator=generator)
            renderer.init_window()
            renderer.run_loop()
            if not renderer.gen_finished:
                # Window closed early, the maze is not a spanning tree yet
                logger.warning("Window closed before generation finished, finishing headless...")
                generator.run_all()
        else:
            logger.info("Headless generation...")
            t0 = time.time()
            generator.run_all()
            logger.info(f"Generation complete in {time.time() - t0:.4f}s")
    finally:
        if evt_writer:
            evt_writer.close()

    stats = MazeAnalyzer.calculate_stats(grid)
    logger.debug(f"Stats: {stats}")

    export_image(grid, args.out)

    if args.save:
        from wilson_maze.io.serializer import MazeSerializer
        logger.info(f"Saving maze to {args.save}...")
        meta = {"algo": "wilson", "seed": args.seed}
        MazeSerializer.save(grid, args.save, meta=meta, seed_only=args.seed_only, compress=args.compress)
        logger.info("Save complete.")

def cmd_render(args):
    from wilson_maze.io.serializer import MazeSerializer
    from wilson_maze.io.image import export_image

    logger.info(f"Loading {args.input_file}...")
    grid, meta = MazeSerializer.load(args.input_file)
    logger.info(f"Loaded {grid.width}x{grid.height} maze. Meta: {meta}")
    export_image(grid, args.out)

def cmd_replay(args):
    from wilson_maze.core.events import EventReader
    from wilson_maze.core.grid import Grid
    from wilson_maze.viz.replay import EventAdapter
    from wilson_maze.viz.renderer import Renderer

    logger.info(f"Replaying {args.event_file}...")
    with EventReader(args.event_file) as reader:
        w, h = reader.read_header()
        logger.info(f"Log Header: {w}x{h}")

        grid = Grid(w, h)
        adapter = EventAdapter(grid, reader)
        renderer = Renderer(grid, generator=adapter, steps_per_frame=args.speed)
        renderer.init_window()
        renderer.run_loop()

def cmd_benchmark(args):
    from wilson_maze.core.grid import Grid
    from wilson_maze.algo.wilson import WilsonsAlgorithm

    print(f"\n{'SIZE':<12} | {'TIME (s)':<10} | {'WALKS':<8} | {'NODES/s':<10}")
    print("-" * 50)

    for size in args.sizes:
        grid = Grid(size, size)
        algo = WilsonsAlgorithm(grid, seed=args.seed)

        t_start = time.time()
        algo.run_all()
        duration = time.time() - t_start

        rate = grid.node_count() / duration if duration > 0 else float("inf")
        print(f"{f'{size}x{size}':<12} | {duration:<10.4f} | {algo.walk_count:<8} | {rate:<10,.0f}")

COMMANDS = {
    "generate": cmd_generate,
    "render": cmd_render,
    "replay": cmd_replay,
    "benchmark": cmd_benchmark,
}

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    try:
        COMMANDS[args.command](args)
    except MazeError as e:
        logger.error(f"Maze generation failed: {e}")
        return 2
    except (OSError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
