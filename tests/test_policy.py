import pytest

from policy import CharacterCounts, SYMBOLS, classify, first_violation, is_valid


@pytest.mark.parametrize('pwd, violation', [
    ('Ab1!', 'too_short'),
    ('Abcdefgh12345678!', 'too_long'),
    ('abcdefg1!', 'no_uppercase'),
    ('ABCDEFG1!', 'no_lowercase'),
    ('Abcdefgh!', 'no_digit'),
    ('Abcdefgh1', 'no_symbol'),
    ('Abcdefg 1!', 'invalid_character'),
    ('Aabb1234!', 'repeated_character'),
])
def test_rejected_passwords(pwd, violation):
    assert not is_valid(pwd)
    assert first_violation(pwd) == violation


def test_accepted_password():
    assert is_valid('Ab1!cD2@')
    assert first_violation('Ab1!cD2@') is None


def test_length_bounds_are_inclusive():
    assert is_valid('Ab1!cD2@')
    assert is_valid('Ab1!cD2@eF3#gH4$')
    assert not is_valid('Ab1!cD2@eF3#gH4$i')


def test_classify_counts():
    assert classify('Ab1!cD2@') == CharacterCounts(length=8, uppercase=2, lowercase=2, digits=2, symbols=2, invalid=0, repeats=0)
    assert classify('') == CharacterCounts()


def test_symbol_set():
    assert len(SYMBOLS) == 31
    assert '`' not in SYMBOLS
    assert ' ' not in SYMBOLS
    assert '\\' in SYMBOLS and '"' in SYMBOLS and "'" in SYMBOLS


def test_repeats_counted_per_adjacent_pair():
    assert classify('aab').repeats == 1
    assert classify('aaa').repeats == 2
    assert classify('!!').repeats == 1
    assert classify('aA').repeats == 0


def test_invalid_characters_skip_repeat_check():
    counts = classify('ab  cd')
    assert counts.invalid == 2
    assert counts.repeats == 0
    assert classify('Ab1!\t\tcD').repeats == 0


def test_non_ascii_is_invalid():
    counts = classify('Ébc1!xyz')
    assert counts.invalid == 1
    assert counts.uppercase == 0
    assert not is_valid('Ébc1!xyZ')


def test_first_violation_accepts_counts():
    counts = classify('Abcdefgh1')
    assert first_violation(counts) == 'no_symbol'


def test_precedence_reports_first_rule():
    # short, and also missing uppercase and symbols
    assert first_violation('abc') == 'too_short'
    assert first_violation('abcdefgh  ') == 'no_uppercase'


def test_is_valid_is_deterministic():
    assert [is_valid('Ab1!cD2@') for _ in range(3)] == [True, True, True]
    assert [is_valid('Aabb1234!') for _ in range(3)] == [False, False, False]
