"""External command integrations for CHECK-SPELLING.

This package contains:
- cargo: Package manager client (list installed packages, install a release)
- typos: typos CLI client and version comparison helpers
"""

from check_spelling.integrations.cargo import CargoClient, InstalledPackage, parse_install_list
from check_spelling.integrations.typos import TyposClient, describe_version_drift

__all__ = [
    # Cargo
    "CargoClient",
    "InstalledPackage",
    "parse_install_list",
    # typos
    "TyposClient",
    "describe_version_drift",
]
