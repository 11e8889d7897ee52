"""Allow running the CLI with ``python -m tpsp``."""

from tpsp.cli.main import run

if __name__ == "__main__":
    run()
