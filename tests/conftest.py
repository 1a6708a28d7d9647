import os
import sys

import pytest

# Ensure repository root is on sys.path so 'eps2pdf' is importable without install
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


SAMPLE_EPS = (
    b"%!PS-Adobe-3.0 EPSF-3.0\n"
    b"%%Creator: test\n"
    b"%%BoundingBox: 10 20 110 220\n"
    b"%%Orientation: Landscape\n"
    b"%%EndComments\n"
    b"newpath 10 20 moveto 110 220 lineto stroke\n"
    b"showpage\n"
    b"%%EOF\n"
)


@pytest.fixture
def sample_eps():
    return SAMPLE_EPS


@pytest.fixture
def eps_file(tmp_path):
    path = tmp_path / 'figure.eps'
    path.write_bytes(SAMPLE_EPS)
    return path
