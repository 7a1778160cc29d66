"""``python -m dbobjgen`` エントリポイント."""

from dbobjgen.cli import app

if __name__ == "__main__":
    app()
