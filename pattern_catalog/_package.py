"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-catalog"
__version__ = "1.0.0"
DESCRIPTION = "runnable, tested demos of classic object-oriented design patterns"
