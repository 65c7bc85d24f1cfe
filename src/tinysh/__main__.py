"""tinysh CLI bootstrap."""

from tinysh.cli import app

if __name__ == "__main__":
    app()
