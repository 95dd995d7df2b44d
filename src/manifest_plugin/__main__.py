"""Entry point for ``python -m manifest_plugin``."""

from manifest_plugin.cli.main import main


if __name__ == "__main__":
    main()
