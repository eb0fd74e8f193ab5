import matplotlib
matplotlib.use('Agg')

import pytest

from password_generator import PolicyGenerator


@pytest.fixture
def generator():
    return PolicyGenerator(seed=1234)


@pytest.fixture
def dataset(tmp_path):
    path = tmp_path / 'dataset.txt'
    rows = [
        ('Ab1!cD2@', 5),
        ('password', 10),
        ('Abcdefg 1!', 2),
        ('Aabb1234!', 3),
        ('00123', 1),
        ('null', 4),
    ]
    path.write_text(''.join('{}\t{}\n'.format(pwd, freq) for pwd, freq in rows), encoding='latin-1')
    return path
