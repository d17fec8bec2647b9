"""
connectfour - Connect Four rules engine

This package provides the board state machine and win detection for
Connect Four, a console session for two human players and a gymnasium
environment for driving games from learning code.
"""

# Version number
__version__ = '0.1.0'
