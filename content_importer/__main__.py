"""
Module entry point for: python -m content_importer

Allows running the importer directly as a module:
    python -m content_importer parse <document> [options]
    python -m content_importer suggest <catalog_json>
    python -m content_importer plan <document> [options]
"""

from .cli import cli


def main():
    cli()


if __name__ == "__main__":
    main()
