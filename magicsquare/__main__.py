from magicsquare.cli import app

if __name__ == "__main__":  # pragma: no cover - CLI entry point
    app(prog_name="magicsquare")
