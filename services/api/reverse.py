"""Word reversal.

Python strings are sequences of Unicode code points, so reversing the
character list never splits a multi-byte character.
"""

NO_WORD_DETECTED = "detceted drow oN"


def reverse_word(word: str) -> str:
    """Return ``word`` with its characters in reverse order."""
    chars = list(word)
    i, j = 0, len(chars) - 1
    while i < j:
        chars[i], chars[j] = chars[j], chars[i]
        i += 1
        j -= 1
    return "".join(chars)
