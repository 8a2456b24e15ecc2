import sys
import os

# Add the project root and the tests directory (for samples.py) to sys.path
tests_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(tests_dir)
for path in (project_root, tests_dir):
    if path not in sys.path:
        sys.path.insert(0, path)
