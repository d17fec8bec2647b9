"""
connectfour.interfaces - User interfaces for Connect Four

Currently a console session for two players sharing a terminal.
"""

# Don't import anything here to avoid circular imports
__all__ = []
