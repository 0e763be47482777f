"""CLI entry point for skill-api.

Allows running the package as a module:
    python -m skill_api
"""

from skill_api.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
