#!/usr/bin/env python3
"""StandTimer entry point.

Run with:
    python main.py
    python -m standtimer
"""

from standtimer.__main__ import main


if __name__ == "__main__":
    main()
