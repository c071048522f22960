"""Allow running the package with ``python -m abstract_factory``."""

from abstract_factory.cli.main import main

if __name__ == "__main__":
    main()
