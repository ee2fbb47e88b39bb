"""
Main entry point for the svue package.

When run as `python -m svue`, it behaves exactly like the `svue` command.
"""

from svue.cli import main

if __name__ == "__main__":
    main()
