import os

import pytest

tomllib = pytest.importorskip('tomllib')

PYPROJECT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', 'pyproject.toml'))


def test_subpackages_without_init_are_installed():
    with open(PYPROJECT, 'rb') as fh:
        data = tomllib.load(fh)
    find = data['tool']['setuptools']['packages']['find']
    assert find['namespaces'] is True
    assert find['where'] == ['backend']
    # lowcard.api and lowcard.services ship without __init__.py
    base = os.path.join(os.path.dirname(PYPROJECT), 'backend', 'lowcard')
    assert not os.path.exists(os.path.join(base, 'api', '__init__.py'))
    assert os.path.exists(os.path.join(base, 'services', 'table', '__init__.py'))
