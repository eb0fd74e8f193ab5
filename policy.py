import string
from dataclasses import dataclass
from typing import Optional, Union

MIN_LENGTH = 8
MAX_LENGTH = 16

UPPERCASE = frozenset(string.ascii_uppercase)
LOWERCASE = frozenset(string.ascii_lowercase)
DIGITS = frozenset(string.digits)
SYMBOLS = frozenset('~!@#$%^&*()_+-={}|[]\\:";\'<>?,./')

# rule names in the order they are checked
VIOLATIONS = ['too_short', 'too_long', 'no_uppercase', 'no_lowercase', 'no_digit', 'no_symbol', 'invalid_character', 'repeated_character']

VIOLATION_MESSAGES = {
    'too_short': 'Use at least {} characters.'.format(MIN_LENGTH),
    'too_long': 'Use at most {} characters.'.format(MAX_LENGTH),
    'no_uppercase': 'Add an uppercase letter (A-Z).',
    'no_lowercase': 'Add a lowercase letter (a-z).',
    'no_digit': 'Include a digit (0-9).',
    'no_symbol': 'Include a symbol from: ' + ' '.join(sorted(SYMBOLS)),
    'invalid_character': 'Only letters, digits and the listed symbols are allowed (no spaces or tabs).',
    'repeated_character': 'Avoid consecutive identical characters.',
}


@dataclass(frozen=True)
class CharacterCounts:
    length: int = 0
    uppercase: int = 0
    lowercase: int = 0
    digits: int = 0
    symbols: int = 0
    invalid: int = 0
    repeats: int = 0


def classify(pwd: str) -> CharacterCounts:
    """
    Counts the character categories of a password.

    A character that is not an ASCII letter, ASCII digit or listed symbol is counted as invalid and is skipped by the repeat check.
    Only the current character's validity gates the repeat check, the next character is compared as is.

    Parameters:
        pwd (str):
            Password to classify.

    Returns:
        CharacterCounts:
            Category counts of pwd.
    """
    counts = dict(uppercase=0, lowercase=0, digits=0, symbols=0, invalid=0, repeats=0)
    n = len(pwd)
    for i, ch in enumerate(pwd):
        if ch in UPPERCASE:
            counts['uppercase'] += 1
        elif ch in LOWERCASE:
            counts['lowercase'] += 1
        elif ch in DIGITS:
            counts['digits'] += 1
        elif ch in SYMBOLS:
            counts['symbols'] += 1
        else:
            counts['invalid'] += 1
            continue
        if i < n - 1 and ch == pwd[i + 1]:
            counts['repeats'] += 1
    return CharacterCounts(length=n, **counts)


def first_violation(pwd: Union[str, CharacterCounts]) -> Optional[str]:
    """
    Finds the first policy rule a password breaks.

    Parameters:
        pwd (str or CharacterCounts):
            Password, or the counts already computed for it by classify().

    Returns:
        Optional[str]:
            Name of the first violated rule (see VIOLATIONS), None if the password is valid.
    """
    counts = pwd if isinstance(pwd, CharacterCounts) else classify(pwd)
    if counts.length < MIN_LENGTH:
        return 'too_short'
    if counts.length > MAX_LENGTH:
        return 'too_long'
    if counts.uppercase == 0:
        return 'no_uppercase'
    if counts.lowercase == 0:
        return 'no_lowercase'
    if counts.digits == 0:
        return 'no_digit'
    if counts.symbols == 0:
        return 'no_symbol'
    if counts.invalid > 0:
        return 'invalid_character'
    if counts.repeats > 0:
        return 'repeated_character'
    return None


def is_valid(pwd: str) -> bool:
    return first_violation(pwd) is None
