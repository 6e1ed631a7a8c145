"""
Module entry-point that makes the package runnable with

    python -m chaosdump

The behaviour is identical to the *chaosdump-cli* console script because the
Click **group** imported below performs all CLI dispatching.
"""

from chaosdump.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
