"""
Auto-import all visualisation modules to ensure registration side-effects run.

After importing this package, `registry.list_ids()` and `registry.create_visualisation()`
will know about all available visualisations.
"""
from __future__ import annotations

import importlib
import pkgutil

for _module in pkgutil.iter_modules(__path__, __name__ + "."):
    importlib.import_module(_module.name)
