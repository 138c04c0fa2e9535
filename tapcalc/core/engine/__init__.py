"""Core state-machine transition utilities.

Responsibilities:
  - Provide the transition function and step result types for input events.
  - Must not render or read input devices; consumes InputEvent values only.
"""
