"""
Mastermind on the command line.

Two ways to play:
- local:  this process owns the secret and scores every guess
- remote: a Mastermind web service owns the secret; we only send guesses
"""

__version__ = "1.0.0"
