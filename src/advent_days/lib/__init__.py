from advent_days.lib.inputs import input_filename, read_input
from advent_days.lib.parsing import blocks, input_lines, match_line, parse_int

__all__ = [
    "blocks",
    "input_filename",
    "input_lines",
    "match_line",
    "parse_int",
    "read_input",
]
