#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four console game

Examples:

    # Two players at one terminal
    python run.py play

    # Custom names and discs
    python run.py play --player1 Alice --disc1 A --player2 Bob --disc2 B

    # Replay a list of columns and print the resulting board
    python run.py render --moves 1,2,1,2,1,2,1

    # Show what the engine is doing
    python run.py --debug_level trace play
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
