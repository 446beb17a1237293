# parser/lexer.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

Each connective has a Unicode spelling (the one the renderer emits) and ASCII
alternatives, so formulas can be typed on any keyboard.

Supported Tokens:
- Negation: ¬ ! ~
- Conjunction: ∧ &
- Disjunction: ∨ |
- Implication: ⇒ -> =>
- Biconditional: ⇔ <-> <=>
- Grouping: ( )
- Keywords: true, false
- Identifiers: propositional variables
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "TRUE",
        "FALSE",
        "ID",
        "NOT",
        "AND",
        "OR",
        "EQUIV",
        "IMPLIES",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # EQUIV before IMPLIES so "<=>" is never split
    EQUIV = r"⇔|<->|<=>"
    IMPLIES = r"⇒|->|=>"
    NOT = r"¬|!|~"
    AND = r"∧|&"
    OR = r"∨|\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    # Keyword mapping: reassign token types for reserved words
    ID["true"] = "TRUE"
    ID["false"] = "FALSE"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
