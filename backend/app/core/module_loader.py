from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Iterable, List

from fastapi import APIRouter


logger = logging.getLogger(__name__)

MODULES_PACKAGE = "app.modules"


def iter_submodules(package: str) -> Iterable[str]:
    pkg = importlib.import_module(package)
    for m in sorted(pkgutil.iter_modules(pkg.__path__), key=lambda m: m.name):
        if m.ispkg:
            yield f"{package}.{m.name}"


def _import_optional(module_pkg: str, name: str):
    target = f"{module_pkg}.{name}"
    try:
        return importlib.import_module(target)
    except ModuleNotFoundError as exc:
        # Only a missing optional submodule is tolerated, never a broken import inside it
        if exc.name != target:
            raise
        return None


def collect_routers() -> List[APIRouter]:
    routers: List[APIRouter] = []
    for mod in iter_submodules(MODULES_PACKAGE):
        _import_optional(mod, "models")
        router_mod = _import_optional(mod, "router")
        router = getattr(router_mod, "router", None)
        if router is not None:
            logger.debug("Registering router from %s", mod)
            routers.append(router)
    return routers
