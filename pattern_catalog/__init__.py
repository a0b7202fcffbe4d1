"""Pattern Catalog - Root Package.

Runnable demonstrations of nine classic object-oriented design patterns
(Observer, Strategy, Command, Decorator, Facade, Adapter, Factory, Builder,
Singleton) plus a reference list of the SOLID principles.

Key Components:
    - domain: demo descriptors, results, principles and the error taxonomy
    - infrastructure: pattern registry, logging and the singleton holder
    - patterns: one self-contained module per design pattern
    - application: the demo runner
    - config: pydantic configuration schemas and loading
    - cli: command line interface

Usage:
    >>> pattern-catalog list
    >>> pattern-catalog run observer
    >>> pattern-catalog run --all
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
