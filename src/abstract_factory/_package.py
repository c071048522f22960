"""Package metadata and naming constants."""

PACKAGE_NAME = "abstract-factory"
__version__ = "1.0.0"
DESCRIPTION = "Abstract Factory pattern demonstration"
