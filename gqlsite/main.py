from __future__ import annotations
from gqlsite.app import app


def main() -> None:
    """Console entrypoint for `gqlsite` and `python -m gqlsite.main`."""
    app()


if __name__ == "__main__":
    main()
