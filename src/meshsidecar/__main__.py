"""Allow running the CLI with ``python -m meshsidecar``."""

from meshsidecar.cli.main import main


if __name__ == "__main__":
    main()
