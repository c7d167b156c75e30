#!/usr/bin/env python3
"""PomoConfig — entry point.

Run with:
    python main.py
    python -m pomoconfig
"""

from pomoconfig.__main__ import main


if __name__ == "__main__":
    main()
