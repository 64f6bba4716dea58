"""Process environment lookups: recognized config basenames and active profiles."""

import logging
import os
from collections.abc import Iterable, Mapping

from configmap2props.core.constants import (
    ACTIVE_PROFILES_ENV_VAR, CONFIG_NAME_ENV_VARS, DEFAULT_CONFIG_NAME,
)
from configmap2props.pacts.types import ConfigNames

logger = logging.getLogger(__name__)


def split_profiles(values: Iterable[str] | None) -> list[str]:
    """Flatten ``["a,b", "c"]`` into ``["a", "b", "c"]``, dropping blanks and repeats."""
    profiles: list[str] = []
    for value in values or ():
        for p in value.split(","):
            p = p.strip()
            if p and p not in profiles:
                profiles.append(p)
    return profiles


def config_names_from_env(environ: Mapping[str, str] | None = None,
                          extra: Iterable[str] = ()) -> ConfigNames:
    """Build the recognized-basename set once, at startup.

    Always holds ``application``; each non-empty override variable and
    each *extra* name adds one more basename.
    """
    env = os.environ if environ is None else environ
    names = {DEFAULT_CONFIG_NAME}
    for var in CONFIG_NAME_ENV_VARS:
        value = env.get(var, "").strip()
        if value:
            logger.debug(f"{var}={value}")
            names.add(value)
    names.update(n for n in extra if n)
    return ConfigNames(frozenset(names))


def active_profiles_from_env(environ: Mapping[str, str] | None = None) -> list[str]:
    """Active profiles from the comma-separated ``SPRING_PROFILES_ACTIVE``."""
    env = os.environ if environ is None else environ
    return split_profiles([env.get(ACTIVE_PROFILES_ENV_VAR, "")])
