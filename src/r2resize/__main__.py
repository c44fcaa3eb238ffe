"""Entry point for running r2resize as a module.

Usage:
    python -m r2resize [command] [options]

Example:
    python -m r2resize list
    python -m r2resize render window_card --content "Hello" -o preview.html
"""

from r2resize.cli import app

if __name__ == "__main__":
    app()
