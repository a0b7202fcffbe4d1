"""Allow ``python -m pattern_catalog``."""
from pattern_catalog.cli.main import run

if __name__ == "__main__":
    run()
