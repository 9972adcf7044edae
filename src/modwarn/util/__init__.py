"""
Utility functions and helpers for modwarn.

- **logger.py**: Centralized logging configuration with colored console output
  through prompt_toolkit, rotating per-session log files, and suppression of
  noisy Discord internals.

- **discord_utils.py**: Stateless Discord helpers: permission checks and
  splitting long replies to fit the message length limit.
"""
