import os
import sys

# Ensure the suite packages are importable when running `pytest` from repo root
BASE_DIR = os.path.dirname(__file__)
SUITE_DIR = os.path.join(BASE_DIR, 'suite')
if SUITE_DIR not in sys.path:
    sys.path.insert(0, SUITE_DIR)

from apps.common.bootstrap import setup  # noqa: E402

setup()
