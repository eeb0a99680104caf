"""Allow running updir as ``python -m updir``."""

from updir.cli.main import app

if __name__ == "__main__":
    app()
