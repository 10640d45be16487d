# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Main entry point for running sshacrypt as a module.

Allows running:
    python -m sshacrypt mkpass
"""

from .main import run

if __name__ == "__main__":
    run()
