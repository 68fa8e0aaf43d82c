"""
Command-line interface for traversal animations.

Usage:
    python -m treewalk --demo                    # dfs.gif and bfs.gif of the demo tree
    python -m treewalk --graph tree.json --mode bfs --output out/
    python -m treewalk --create-template config.json
    python -m treewalk --help
"""

import argparse
import json
import logging
import os
from typing import List, Dict

from .animation import Frame
from .config import RenderConfig, load_config, create_default_config
from .graph import GraphStore, make_demo_graph
from .image_io import save_animation
from .traversal import run_traversal, TraversalMode


def load_graph_file(path: str) -> GraphStore:
    """
    Load a tree from JSON.

    Format:
        {"edges": [[0, 1], [0, 2], [1, 3]]}
    """
    with open(path, 'r') as f:
        data = json.load(f)
    return GraphStore.from_edges((int(a), int(b)) for a, b in data.get("edges", []))


def render_modes(
    graph_factory,
    modes: List[str],
    config: RenderConfig,
    output_dir: str,
    start: int = 0,
    timestamp: bool = True,
) -> Dict[str, List[Frame]]:
    """
    Run each traversal on a fresh graph and save <mode>.gif in output_dir.

    Args:
        graph_factory: Zero-argument callable building the graph
        modes: Traversal names ("dfs", "bfs")
        config: Render configuration
        output_dir: Where GIFs are written
        start: Traversal start node
        timestamp: Inject timestamps into filenames

    Returns:
        Dict mapping mode name to its frames
    """
    os.makedirs(output_dir, exist_ok=True)
    results = {}
    for mode in modes:
        graph = graph_factory()
        print(f"\n[{mode.upper()}] {graph!r}")
        frames = run_traversal(graph, mode, start=start, config=config)
        print(f"  Frames: {len(frames)}")
        save_animation(
            frames,
            os.path.join(output_dir, f"{mode}.gif"),
            palette=config.palette,
            timestamp=timestamp,
        )
        results[mode] = frames
    return results


def build_config(args) -> RenderConfig:
    """Config file (if any) overridden by explicit command-line values."""
    config = load_config(args.config) if args.config else RenderConfig()
    overrides = {
        "canvas_size": args.size,
        "point_size": args.point_size,
        "frame_delay": args.delay,
        "remainder": args.remainder,
    }
    d = config.to_dict()
    d.update({k: v for k, v in overrides.items() if v is not None})
    if args.no_trailing_sweeps:
        d["trailing_sweeps"] = False
    return RenderConfig.from_dict(d)


def main(argv=None):
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Animate DFS/BFS traversals of a tree as GIFs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m treewalk --demo                       # Demo tree, both traversals
  python -m treewalk --demo --no-trailing-sweeps  # BFS without the repeat frames
  python -m treewalk --graph tree.json --mode dfs --size 200
        """
    )

    parser.add_argument(
        "--demo", action="store_true",
        help="Animate the built-in demo tree"
    )
    parser.add_argument(
        "--graph", type=str, default=None,
        help='JSON file with {"edges": [[src, dst], ...]}'
    )
    parser.add_argument(
        "--create-template", type=str, default=None, metavar="FILE",
        help="Write the default config to FILE and exit"
    )

    parser.add_argument(
        "--mode", "-m", type=str, default="both",
        choices=["dfs", "bfs", "both"],
        help="Traversal to animate (default: both)"
    )
    parser.add_argument(
        "--start", type=int, default=0,
        help="Traversal start node (default: 0)"
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="JSON render config"
    )
    parser.add_argument(
        "--size", "-s", type=int, default=None,
        help="Canvas width and height (default: 400)"
    )
    parser.add_argument(
        "--point-size", type=int, default=None,
        help="Node marker size (default: 12)"
    )
    parser.add_argument(
        "--delay", type=int, default=None,
        help="Frame delay in hundredths of a second (default: 50)"
    )
    parser.add_argument(
        "--remainder", type=str, default=None,
        choices=["truncate", "distribute"],
        help="What to do with leftover pixels when splitting an interval"
    )
    parser.add_argument(
        "--no-trailing-sweeps", action="store_true",
        help="Stop BFS when the queue is exhausted"
    )

    parser.add_argument(
        "--output", "-o", type=str, default=".",
        help="Output directory (default: current directory)"
    )
    parser.add_argument(
        "--no-timestamp", action="store_true",
        help="Write dfs.gif/bfs.gif without timestamps (overwrites)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.create_template:
        with open(args.create_template, 'w') as f:
            json.dump(create_default_config(), f, indent=2)
        print(f"Created template config: {args.create_template}")
        return None

    if not (args.demo or args.graph):
        parser.print_help()
        print("\nRun with --demo for quick start, or specify --graph")
        return None

    if args.graph and not os.path.exists(args.graph):
        print(f"Graph file not found: {args.graph}")
        return None

    config = build_config(args)
    modes = [m.value for m in TraversalMode] if args.mode == "both" else [args.mode]

    if args.demo:
        graph_factory = make_demo_graph
    else:
        graph_factory = lambda: load_graph_file(args.graph)

    print("=" * 60)
    print("Traversal Animation")
    print("=" * 60)
    print(f"  Canvas: {config.canvas_size}x{config.canvas_size}, delay {config.frame_delay}")

    results = render_modes(
        graph_factory,
        modes,
        config,
        args.output,
        start=args.start,
        timestamp=not args.no_timestamp,
    )

    print("\n" + "=" * 60)
    print("Output saved to:", args.output)
    print("=" * 60)
    return results


if __name__ == "__main__":
    main()
