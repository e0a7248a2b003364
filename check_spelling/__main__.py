"""Entry point for running check_spelling as a module.

This allows running the application with:
    python -m check_spelling [OPTIONS] [TARGET]
"""

from check_spelling.cli import app

if __name__ == "__main__":
    app()
