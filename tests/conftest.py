import sys

import pytest


@pytest.fixture
def digit_limit():
    """Pin the int/str conversion limit to the interpreter default."""
    old = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield
    sys.set_int_max_str_digits(old)
