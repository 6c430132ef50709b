#!/usr/bin/env python3
"""
Typewriter - command line entry point.

Types the given text one character at a time. With no text it runs a short
demo of the duration syntax.

To run: python main.py "hello world" --durations "default 40.ms, ' '->200.ms"
"""

from typewriter.cli import main

if __name__ == "__main__":
    main()
