"""Timezone provider selection.

The configured provider is resolved once, on first use, and then cached so
that every later call goes straight to the provider instance.

A provider spec may be:
1. a built-in short name (``utc``, ``zoneinfo``, ``pytz``, ``dateutil``);
2. the name of an entry point in the ``zonedtime.providers`` group, which is
   how third-party packages register providers;
3. a dotted path, ``package.module:ClassName`` or ``package.module.ClassName``.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from importlib.metadata import entry_points
from typing import Any, Optional, Union

from .config_loader import Config, load_config
from .exceptions import ProviderConfigurationError
from .providers.base import TimezoneProvider

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "zonedtime.providers"

BUILTIN_PROVIDERS: dict[str, str] = {
    "utc": "zonedtime.providers.utc_only:UTCOnlyProvider",
    "zoneinfo": "zonedtime.providers.zoneinfo_provider:ZoneInfoProvider",
    "pytz": "zonedtime.providers.pytz_provider:PytzProvider",
    "dateutil": "zonedtime.providers.dateutil_provider:DateutilProvider",
}

ProviderLike = Union[TimezoneProvider, str]

_current_provider: Optional[TimezoneProvider] = None


def _entry_point_targets() -> dict[str, str]:
    return {ep.name: ep.value for ep in entry_points(group=ENTRY_POINT_GROUP)}


def available_providers() -> dict[str, str]:
    """Return provider names mapped to their import targets.

    Entry points registered by installed packages are merged under the
    built-ins; a built-in name always loads the built-in provider.
    """
    providers = _entry_point_targets()
    providers.update(BUILTIN_PROVIDERS)
    return providers


def _import_target(target: str) -> Any:
    """Import ``module:attr`` or ``module.attr`` and return the attribute."""
    if ":" in target:
        module_name, _, attr = target.partition(":")
    else:
        module_name, _, attr = target.rpartition(".")
    if not module_name or not attr:
        raise ProviderConfigurationError(f"Invalid provider path {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ProviderConfigurationError(
            f"Cannot import timezone provider module {module_name!r}: {exc}"
        ) from exc

    obj: Any = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ProviderConfigurationError(
                f"Module {module_name!r} has no attribute {attr!r}"
            ) from exc
    return obj


def load_provider_class(spec: str) -> type[TimezoneProvider]:
    """Resolve a provider spec to a ``TimezoneProvider`` subclass.

    Raises:
        ProviderConfigurationError: If the spec cannot be resolved or does
            not name a TimezoneProvider subclass
    """
    spec = spec.strip()
    providers = available_providers()
    target = providers.get(spec, "")
    if not target:
        if "." not in spec and ":" not in spec:
            raise ProviderConfigurationError(
                f"Unknown timezone provider {spec!r}; expected one of "
                f"{sorted(providers)} or a dotted path"
            )
        target = spec

    cls = _import_target(target)
    if not isinstance(cls, type) or not issubclass(cls, TimezoneProvider):
        raise ProviderConfigurationError(f"{target!r} is not a TimezoneProvider subclass")
    return cls


def build_provider(spec: str, options: Optional[dict[str, Any]] = None) -> TimezoneProvider:
    """Instantiate the provider named by ``spec`` with keyword ``options``."""
    cls = load_provider_class(spec)
    try:
        return cls(**(options or {}))
    except TypeError as exc:
        raise ProviderConfigurationError(
            f"Invalid options for timezone provider {spec!r}: {exc}"
        ) from exc


def provider_from_config(config: Config) -> TimezoneProvider:
    provider = build_provider(config.timezone_provider, config.provider_options)
    logger.info(
        "Using %s timezone provider (from %s)",
        provider.name,
        config.source or "defaults",
    )
    return provider


def _coerce(provider: ProviderLike) -> TimezoneProvider:
    if isinstance(provider, TimezoneProvider):
        return provider
    if isinstance(provider, str):
        return build_provider(provider)
    raise TypeError(f"Expected TimezoneProvider or provider spec, got {type(provider)}")


def get_provider() -> TimezoneProvider:
    """Return the active provider, resolving it from configuration once."""
    global _current_provider
    if _current_provider is None:
        _current_provider = provider_from_config(load_config())
    return _current_provider


def set_provider(provider: ProviderLike) -> TimezoneProvider:
    """Replace the active provider with an instance or a provider spec."""
    global _current_provider
    _current_provider = _coerce(provider)
    logger.debug("Active timezone provider set to %r", _current_provider)
    return _current_provider


def reset_provider() -> None:
    """Forget the active provider; the next ``get_provider()`` re-reads config."""
    global _current_provider
    _current_provider = None


@contextmanager
def use_provider(provider: ProviderLike) -> Iterator[TimezoneProvider]:
    """Temporarily make ``provider`` the active provider."""
    global _current_provider
    previous = _current_provider
    active = _coerce(provider)
    _current_provider = active
    try:
        yield active
    finally:
        _current_provider = previous
