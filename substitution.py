from typing import Optional

from policy import is_valid

SUBSTITUTION_TABLE = {
    'L': '1', 'l': '1',
    'Z': '2', 'z': '2',
    'E': '3', 'e': '3',
    'A': '4', 'a': '4',
    'S': '5', 's': '5',
    'b': '6',
    'T': '7', 't': '7',
    'B': '8',
    'g': '9',
    'O': '0', 'o': '0',
}


def substitute_char(ch: str) -> str:
    return SUBSTITUTION_TABLE.get(ch, ch)


def substitute(pwd: str) -> Optional[str]:
    """
    Replaces letters with look-alike digits and re-validates the result.
    The input is expected to be a valid password already, only the output is checked.

    Parameters:
        pwd (str):
            Valid password.

    Returns:
        Optional[str]:
            The substituted password, or None if it no longer satisfies the policy.
    """
    sub = ''.join(substitute_char(ch) for ch in pwd)
    if is_valid(sub):
        return sub
    return None
