#!/usr/bin/env python3
"""
Essay Grader CLI Entry Point

Runs the essay-grader command-line tool from a source checkout.
"""

import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent / 'src'
if src_path.exists():
    sys.path.insert(0, str(src_path))

from essay_grader.main import main

if __name__ == '__main__':
    main()
