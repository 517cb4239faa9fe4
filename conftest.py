import os
import sys

# Puts the repository root on sys.path so tests import debug_aware_core without an install.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__))))
