"""
Tokenization helpers shared by the sentence translator and question answerer.
"""

import string
from typing import List

WHITESPACE = " \t\n\r"


def strip_punctuation(token: str) -> str:
    """Remove trailing punctuation characters from a token."""
    return token.rstrip(string.punctuation)


def normalize(token: str) -> str:
    """Lowercase a token and strip its trailing punctuation."""
    return strip_punctuation(token.lower())


def split_tokens(text: str) -> List[str]:
    """
    Split a sentence on single spaces.

    Each piece is trimmed of surrounding whitespace and empty pieces are
    dropped. Case and punctuation are left untouched.
    """
    tokens = []
    for piece in text.split(" "):
        piece = piece.strip(WHITESPACE)
        if piece:
            tokens.append(piece)
    return tokens


def split_words(text: str) -> List[str]:
    """Split on any whitespace and strip trailing punctuation from each word."""
    return [strip_punctuation(word) for word in text.split()]


def token_at(tokens: List[str], index: int) -> str:
    """Normalized token at a position, or an empty string when out of range."""
    if 0 <= index < len(tokens):
        return normalize(tokens[index])
    return ""


def keyword_at(tokens: List[str], index: int) -> str:
    """
    Lowercased token at a position, punctuation kept, or an empty string when
    out of range. A punctuated "of," is not the keyword "of".
    """
    if 0 <= index < len(tokens):
        return tokens[index].lower()
    return ""
