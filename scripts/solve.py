#!/usr/bin/env python3
"""Solve a starting position and print the summary counters and best move."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from gobblers import parse_board, render_board
from gobblers.core import initial_state
from gobblers.features import parse_player
from gobblers.orchestration import SolveConfig, solve_position


def load_config(path: Optional[str]) -> Dict:
    if not path:
        return {}
    cfg_path = Path(path)
    if not cfg_path.exists():
        return {}
    return yaml.safe_load(cfg_path.read_text()) or {}


def starting_state(cfg: Dict) -> int:
    to_move = cfg.get("to_move", "orange")
    board = cfg.get("board")
    if board is None:
        return initial_state(parse_player(to_move))
    return parse_board(board, to_move)


def main(argv: Optional[List[str]] = None) -> Dict[str, object]:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/solve.yaml")
    parser.add_argument("--max-iterations", type=int)
    parser.add_argument("--no-late-edges", action="store_true")
    parser.add_argument("--progress", dest="progress", action="store_true", default=None)
    parser.add_argument("--no-progress", dest="progress", action="store_false")
    parser.add_argument("--validate", action="store_true")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    cfg = load_config(args.config)
    max_iterations = args.max_iterations if args.max_iterations is not None else cfg.get("max_iterations", 100_000_000)
    late_edges = False if args.no_late_edges else cfg.get("propagate_late_edges", True)
    show_progress = args.progress if args.progress is not None else cfg.get("show_progress", False)
    validate = args.validate or cfg.get("validate", False)

    config = SolveConfig(
        max_iterations=max_iterations,
        propagate_late_edges=late_edges,
        show_progress=show_progress,
        validate=validate,
    )

    start = starting_state(cfg)
    print("Initial board:")
    print(render_board(start))
    print()

    summary = solve_position(start, config)
    output = summary.as_dict()
    print(json.dumps(output, indent=2))

    if summary.best is None:
        print("No boards are computed.")
    else:
        print("Best move:")
        print(render_board(summary.best.state))
    return output


if __name__ == "__main__":
    main()
