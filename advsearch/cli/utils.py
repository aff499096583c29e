"""
CLI Utilities Module.

Common utility functions for CLI tools.
"""

import logging
from pathlib import Path
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)


def validate_input_path(input_path: str) -> bool:
    """
    Validate that an input file exists and is a regular file.

    Args:
        input_path: Path to the file to read.

    Returns:
        True if valid, False otherwise.
    """
    path = Path(input_path)

    if not path.exists():
        logger.error(f"Input file not found: {input_path}")
        return False
    if not path.is_file():
        logger.error(f"Input path is not a file: {input_path}")
        return False

    return True


def read_lines(stream: TextIO) -> List[str]:
    """Reads all lines from a stream without their line terminators."""
    return [line.rstrip("\r\n") for line in stream]


def split_fields(line: str, separator: Optional[str]) -> List[str]:
    """
    Splits a line into facets.

    Args:
        line: The input line.
        separator: Field separator, or None to keep the line whole.

    Returns:
        List[str]: The facets, in order.
    """
    if separator is None:
        return [line]
    return line.split(separator)
