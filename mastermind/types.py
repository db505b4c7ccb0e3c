"""
Labels for clarity.
"""

from typing import List

Digit = int  # 1 -> 6 by default
Code = List[Digit]  # secret or guess, one digit per position
