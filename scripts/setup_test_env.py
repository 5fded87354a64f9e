#!/usr/bin/env python3
"""
Create the CLI integration test user and print a PIPEUP_TOKEN for local/dev.
Credentials come from env (TEST_EMAIL, TEST_USERNAME, TEST_PASSWORD) or dev defaults.

    eval "$(python scripts/setup_test_env.py --quiet)"
"""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pipeup_setup.main import main

if __name__ == "__main__":
    sys.exit(main())
