#!/usr/bin/env python3
"""
Play TicTacToe against (or watch) the minimax AI.

Usage:
    python play.py -x -o                       # AI vs AI
    python play.py -o                          # You are X, AI is O
    python play.py -x -o -n --it 500 --o-bad 2 # 500 quiet games, O blunders
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from ttt_minimax.cli import main


if __name__ == "__main__":
    sys.exit(main())
