# rbdb/__init__.py
#
# RBDB: line-oriented key/value shell over one in-memory table.

PACKAGE_VERSION = "0.1.0"  # read by pyproject (dynamic version)

__all__ = ["PACKAGE_VERSION"]
