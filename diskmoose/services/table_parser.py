"""
Whitespace-delimited table parsing for mount, who and df output.

Real tool output pads columns irregularly, so columns are located by
position after collapsing runs of whitespace, never by character offset.
"""

from typing import List


def fields(line: str) -> List[str]:
    """
    Split a line into its non-empty whitespace separated tokens.

    >>> fields("a  b c    d     ")
    ['a', 'b', 'c', 'd']
    """
    return line.split()


def data_lines(text: str) -> List[str]:
    """Return the non-blank lines of text, in order."""
    return [line for line in text.splitlines() if line.strip()]
