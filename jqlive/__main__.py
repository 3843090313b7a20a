"""Module entrypoint for ``python -m jqlive``.

All argument parsing and runtime setup happen in ``jqlive.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
