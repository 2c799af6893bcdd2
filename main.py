#!/usr/bin/env python3
"""Run the box packer from a source checkout: ``python main.py INPUT``."""

from packer.main import run

if __name__ == "__main__":
    run()
