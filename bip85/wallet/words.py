"""
Word counting for phrases typed or pasted by a user
"""
__all__ = ["count_words", "WORD_SEPARATORS"]

WORD_SEPARATORS = frozenset(" \t\r\n")


def count_words(text: str) -> int:
    """
    Count maximal runs of characters that are not space, tab, carriage return or newline.
    One pass, no intermediate list.
    """
    count = 0
    in_word = False
    for char in text:
        if char in WORD_SEPARATORS:
            in_word = False
        elif not in_word:
            count += 1
            in_word = True
    return count
