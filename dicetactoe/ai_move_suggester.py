#!/usr/bin/env python3
"""
AI Move Suggester Script

This script takes a board representation as input and returns the AI's suggested move
for the tic-tac-toe game.

Usage:
    dicetactoe-suggest <board_string> <side> [options]

Board String Format:
    9-character string representing cells 0-8 in row-major order, where:
    - 'X' = X occupies this cell
    - 'O' = O occupies this cell
    - '_' = Empty cell

Example:
    dicetactoe-suggest "XX__O___O" X
    dicetactoe-suggest "_________" O --depth 2 --format json
"""

import sys
import argparse
import json
import random

from .game.board import Board
from .models.enums import Side
from .ai.engine import AIEngine, AIDecision, AIDecisionError
from .ai.search.tie_break import RandomChooser


def format_output(decision: AIDecision, format_type: str = 'human') -> str:
    """
    Format the AI decision output.

    Args:
        decision: AIDecision object
        format_type: Output format ('human', 'json', 'simple')

    Returns:
        Formatted output string
    """
    if format_type == 'json':
        output = {
            'suggested_move': decision.move.position,
            'side': decision.move.side.symbol,
            'reasoning': decision.reasoning,
            'metrics': {
                'move_time': decision.metrics.move_time,
                'search_depth': decision.metrics.search_depth,
                'nodes_evaluated': decision.metrics.nodes_evaluated,
                'evaluation_score': decision.metrics.evaluation_score
            }
        }
        return json.dumps(output, indent=2)

    elif format_type == 'simple':
        return str(decision.move.position)

    else:  # human format
        output = []
        output.append(f"AI Suggested Move: {decision.move.position}")
        output.append(f"Side: {decision.move.side.symbol}")
        output.append(f"Reasoning: {decision.reasoning}")
        output.append("")
        output.append("Performance Metrics:")
        output.append(f"  Time taken: {decision.metrics.move_time:.3f}s")
        output.append(f"  Search depth: {decision.metrics.search_depth}")
        output.append(f"  Nodes evaluated: {decision.metrics.nodes_evaluated}")
        output.append(f"  Evaluation score: {decision.metrics.evaluation_score:.2f}")
        return "\n".join(output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dicetactoe-suggest',
        description="Get AI move suggestion for tic-tac-toe",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Get move for X on empty board
  dicetactoe-suggest "_________" X

  # Get move for X with a deeper search and JSON output
  dicetactoe-suggest "XX__O___O" X --depth 3 --format json

  # Simple output (just the cell number), reproducible
  dicetactoe-suggest "X___O____" X --format simple --seed 7
        """
    )

    parser.add_argument(
        'board_string',
        help='9-character board representation (X/O/_ for each cell 0-8)'
    )

    parser.add_argument(
        'side',
        choices=['X', 'O'],
        help='Side to move (X or O)'
    )

    parser.add_argument(
        '--depth',
        type=int,
        default=1,
        help='Search depth (default: 1)'
    )

    parser.add_argument(
        '--format',
        choices=['human', 'json', 'simple'],
        default='human',
        help='Output format (default: human)'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the tie-break random choice'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    return parser


def main(argv=None) -> int:
    """Main function to handle command line arguments and run AI move suggestion."""
    args = build_parser().parse_args(argv)

    try:
        board = Board.from_string(args.board_string)
        side = Side.from_symbol(args.side)

        ai_engine = AIEngine(
            depth=args.depth,
            chooser=RandomChooser(random.Random(args.seed)),
            enable_logging=args.verbose
        )

        decision = ai_engine.select_move(board, side)
        print(format_output(decision, args.format))

    except (ValueError, AIDecisionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
