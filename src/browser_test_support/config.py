"""
Configuration Loader
--------------------

Builds the :class:`EnvironmentVariables` store that resolvers read from.
Settings come from a YAML file (``config/serenity.yaml`` by default, or
the path in ``BROWSER_TEST_CONFIG``) after ``.env`` files have been
loaded into the process environment.  Nested YAML sections are
flattened into dotted keys, so this document::

    environment: ci
    environments:
      ci:
        webdriver:
          base.url: http://ci.example.com

yields ``environment=ci`` and
``environments.ci.webdriver.base.url=http://ci.example.com``.

When a key also exists as an environment variable, spelled in upper case
with dots turned into underscores (``WEBDRIVER_BASE_URL`` for
``webdriver.base.url``), the environment variable takes precedence.

Overrides apply only to keys the YAML already defines, plus
``ENVIRONMENT``, which always sets ``environment``.  An upper case name
cannot be mapped back to a unique dotted key, so a variable such as
``WEBDRIVER_BASE_URL`` set only in the process environment is not
loaded.  Declare the key in YAML (``key: ""`` will do) to make it
overridable.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from .environment.errors import ConfigurationError
from .environment.specific_configuration import ENVIRONMENT_KEY
from .environment.variables import EnvironmentVariables
from .utils.logger import get_logger


logger = get_logger(__name__)

CONFIG_PATH_VARIABLE = "BROWSER_TEST_CONFIG"
DEFAULT_CONFIG_PATH = Path("config") / "serenity.yaml"


def environ_key(dotted_key: str) -> str:
    """``webdriver.base.url`` -> ``WEBDRIVER_BASE_URL``."""
    return dotted_key.upper().replace(".", "_").replace("-", "_")


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.warning("Configuration file %s not found", path)
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse YAML config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Top level of {path} must be a mapping, got {type(data).__name__}")
    return data


def load_environment_variables(
    yaml_path: Optional[Union[str, Path]] = None,
    use_environ: bool = True,
) -> EnvironmentVariables:
    """Load YAML and environment based properties into a fresh store."""
    load_dotenv()
    if yaml_path is None:
        yaml_path = os.getenv(CONFIG_PATH_VARIABLE) or DEFAULT_CONFIG_PATH
    path = Path(yaml_path)

    variables = EnvironmentVariables.from_dict(_read_yaml(path))
    logger.debug("Loaded %d properties from %s", len(variables), path)

    if use_environ:
        overridden = 0
        for key in list(variables.keys()):
            env_val = os.getenv(environ_key(key))
            if env_val is not None:
                variables.set_property(key, env_val)
                overridden += 1
        active = os.getenv(environ_key(ENVIRONMENT_KEY))
        if active is not None and ENVIRONMENT_KEY not in variables:
            variables.set_property(ENVIRONMENT_KEY, active)
            overridden += 1
        if overridden:
            logger.debug("%d properties overridden from the process environment", overridden)
    return variables


__all__ = ["load_environment_variables", "environ_key", "DEFAULT_CONFIG_PATH"]
