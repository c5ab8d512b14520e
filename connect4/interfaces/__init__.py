"""
connect4.interfaces - User interfaces for Connect Four

This package contains front ends that translate user input into engine
moves and display the results.
"""

# Don't import anything here to avoid circular imports
__all__ = []
