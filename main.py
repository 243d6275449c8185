"""Run the tiny file merger from a source checkout.

Usage:
    python main.py <input-a> <input-b> [<input-c>...] <output>
"""

from tiny_merge.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
