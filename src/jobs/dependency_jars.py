"""Ship-list management for distributed jobs.

This module locates the code artifact that defines each class and
records it in the job's ``tmpjars`` ship-list.
"""

from __future__ import annotations

import sys
import zipimport
from pathlib import Path

from conf.job_conf import JobConf
from core.constants import SHIP_JARS_KEY
from core.errors import DependencyResolutionError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def add_dependency_jars(conf: JobConf, *classes: type | None) -> list[str]:
    """Add the artifacts defining the given classes to the ship-list.

    Existing entries are preserved and duplicates are dropped, so
    repeated calls with the same classes leave the ship-list unchanged.

    Args:
        conf: Job configuration, updated in place.
        classes: Classes whose artifacts must travel with the job.
            None entries are ignored.

    Returns:
        The resulting ship-list entries.

    Raises:
        DependencyResolutionError: If an artifact cannot be located or
            does not exist on the local filesystem.
    """
    jars = list(dict.fromkeys(conf.get_strings(SHIP_JARS_KEY)))
    added: list[str] = []
    for cls in classes:
        if cls is None:
            continue
        artifact_path = find_artifact(cls)
        if artifact_path is None:
            raise DependencyResolutionError(
                f"Could not find the artifact for class {cls!r} in order to ship it to the cluster."
            )
        if not artifact_path.exists():
            raise DependencyResolutionError(
                f"Could not validate artifact {artifact_path} for class {cls!r}."
            )
        qualified = artifact_path.resolve().as_uri()
        if qualified not in jars:
            jars.append(qualified)
            added.append(qualified)
    if not jars:
        return jars
    conf.set_strings(SHIP_JARS_KEY, jars)
    if added:
        _LOGGER.info("dependency_jars_added", jars=added)
    return jars


def find_artifact(cls: type) -> Path | None:
    """Return the archive, package directory, or module file defining a class.

    Args:
        cls: Class to locate.

    Returns:
        Artifact path, or None for classes without a source location.
    """
    module = sys.modules.get(cls.__module__)
    if module is None:
        return None
    spec = getattr(module, "__spec__", None)
    loader = getattr(spec, "loader", None)
    if isinstance(loader, zipimport.zipimporter):
        return Path(loader.archive)
    top_level_name = cls.__module__.split(".", 1)[0]
    top_level = sys.modules.get(top_level_name)
    if top_level is not None and hasattr(top_level, "__path__"):
        return _package_directory(top_level)
    module_file = getattr(module, "__file__", None)
    return Path(module_file) if module_file else None


def _package_directory(package: object) -> Path | None:
    package_file = getattr(package, "__file__", None)
    if package_file:
        return Path(package_file).parent
    search_path = list(getattr(package, "__path__", []))
    return Path(search_path[0]) if search_path else None
