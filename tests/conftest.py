"""
Pytest configuration for gd3dmath tests.
Adds the src directory to sys.path so the tests run against the source tree without an install,
and the tests directory so 'from test_fixtures import ...' works from any subfolder.
"""
import sys
from pathlib import Path

tests_path = Path(__file__).parent
src_path = tests_path.parent / "src"
for path in (src_path, tests_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
