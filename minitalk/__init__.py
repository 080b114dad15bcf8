"""Send messages between processes one bit at a time over SIGUSR1 and SIGUSR2.

Also holds small text, number, formatting and line-reading helpers.
"""

__version__ = "0.1.0"