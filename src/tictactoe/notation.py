"""
Text form of a board, modelled after the piece placement part of a FEN string.
---

* three rows separated by '/', top row first
* 'X' and 'O' are marks
* a digit is a run of that many empty cells

ex. an empty board reads `3/3/3`, and `XO1/1X1/2O` is X on 0 and 4, O on 1 and 8.
"""

from src.tictactoe.marks import SYMBOL_TO_MARK

BOARD_SIZE = 3
EMPTY_BOARD_NOTATION = "/".join([str(BOARD_SIZE)] * BOARD_SIZE)


def is_valid_board_notation(notation: str) -> bool:
    """Check if given string describes exactly three rows of three cells."""
    rows = notation.split("/")
    if len(rows) != BOARD_SIZE:
        return False
    return all(_is_valid_row(row) for row in rows)


def _is_valid_row(row: str) -> bool:
    cell_count = 0
    previous_was_digit = False
    for character in row:
        if character.isdigit():
            # two consecutive digits ('12') are ambiguous, FEN does not allow it either
            if previous_was_digit or not 1 <= int(character) <= BOARD_SIZE:
                return False
            cell_count += int(character)
            previous_was_digit = True
        elif character.upper() in SYMBOL_TO_MARK:
            cell_count += 1
            previous_was_digit = False
        else:
            return False
    return cell_count == BOARD_SIZE
