"""Methodology registry: identifier -> validated policy."""
import json
import logging
import os
from collections.abc import Mapping
from typing import Iterator

from zakatcore.data.methodologies import BUILTIN_METHODOLOGIES, DEFAULT_METHODOLOGY_ID
from . import DuplicateMethodologyError, MethodologyError, UnknownMethodologyError
from .loader import DEFAULT_POLICY, load_methodology
from .schema import MethodologyPolicy

logger = logging.getLogger(__name__)


class MethodologyRegistry:
    """Read-mostly mapping of methodology identifiers to validated policies.

    Every entry passes through the validator before it is stored. Lookups of
    unknown identifiers raise ``UnknownMethodologyError``; the default policy
    is only handed out by ``get_or_default``, which logs the substitution.
    Once ``freeze()`` has been called the registry rejects new entries and is
    safe for unsynchronized concurrent reads.
    """

    def __init__(self, default_id: str = DEFAULT_METHODOLOGY_ID):
        self._policies: dict[str, MethodologyPolicy] = {}
        self._default_id = default_id
        self._frozen = False

    @property
    def default_id(self) -> str:
        return self._default_id

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, document, key: str | None = None) -> MethodologyPolicy:
        """Validate and register a methodology.

        Args:
            document: Raw mapping or an already validated policy.
            key: Registry identifier (defaults to ``meta.id``).

        Returns:
            The registered policy.

        Raises:
            MethodologyValidationError: Document failed validation.
            DuplicateMethodologyError: Identifier already registered.
            MethodologyError: Registry is frozen.
        """
        if self._frozen:
            raise MethodologyError('Methodology registry is frozen')
        policy = load_methodology(document)
        key = key or policy.meta.id
        if key in self._policies:
            raise DuplicateMethodologyError(f'Methodology already registered: {key}')
        self._policies[key] = policy
        logger.info(f"Registered methodology {key} ({policy.meta.name} v{policy.meta.version})")
        return policy

    def freeze(self) -> None:
        self._frozen = True

    def get(self, key: str) -> MethodologyPolicy:
        try:
            return self._policies[key]
        except KeyError:
            raise UnknownMethodologyError(key) from None

    def get_or_default(self, key: str | None) -> MethodologyPolicy:
        """Look up ``key``, falling back to the default with a logged warning."""
        if key is not None and key in self._policies:
            return self._policies[key]
        default = self._policies.get(self._default_id, DEFAULT_POLICY)
        logger.warning(f"Methodology {key!r} not registered, using default {default.meta.id}")
        return default

    @property
    def default(self) -> MethodologyPolicy:
        return self._policies.get(self._default_id, DEFAULT_POLICY)

    def ids(self) -> list[str]:
        return list(self._policies)

    def items(self) -> Iterator[tuple[str, MethodologyPolicy]]:
        return iter(self._policies.items())

    def __contains__(self, key: object) -> bool:
        return key in self._policies

    def __len__(self) -> int:
        return len(self._policies)


def build_builtin_registry(default_id: str = DEFAULT_METHODOLOGY_ID) -> MethodologyRegistry:
    """Create a registry holding every built-in preset."""
    registry = MethodologyRegistry(default_id=default_id)
    for key, document in BUILTIN_METHODOLOGIES.items():
        if key == DEFAULT_METHODOLOGY_ID:
            registry.register(DEFAULT_POLICY, key=key)
        else:
            registry.register(document, key=key)
    if default_id not in registry:
        raise UnknownMethodologyError(default_id)
    return registry


def load_community_methodologies(registry: MethodologyRegistry, directory: str) -> tuple[list[str], dict[str, list[str]]]:
    """Register every ``*.json`` methodology document found in ``directory``.

    Invalid or duplicate documents are skipped with a warning; they never
    replace a registered methodology.

    Returns:
        Tuple of (registered ids, {filename: errors} for rejected files)
    """
    loaded = []
    rejected = {}
    if not directory or not os.path.isdir(directory):
        return loaded, rejected

    for filename in sorted(os.listdir(directory)):
        if not filename.endswith('.json'):
            continue
        path = os.path.join(directory, filename)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            rejected[filename] = [f'<root>: {e}']
            logger.warning(f"Skipping community methodology {filename}: {e}")
            continue

        if isinstance(document, Mapping) and isinstance(document.get('meta'), Mapping):
            meta = dict(document['meta'])
            meta['tier'] = 'community'
            document = {**document, 'meta': meta}

        try:
            policy = registry.register(document)
        except MethodologyError as e:
            rejected[filename] = list(getattr(e, 'errors', [str(e)]))
            logger.warning(f"Skipping community methodology {filename}: {e}")
            continue
        loaded.append(policy.meta.id)

    return loaded, rejected


_registry: MethodologyRegistry | None = None


def get_registry() -> MethodologyRegistry:
    """Get the process-wide registry (built-in presets, frozen)."""
    global _registry
    if _registry is None:
        registry = build_builtin_registry()
        registry.freeze()
        _registry = registry
    return _registry


def init_registry(community_dir: str | None = None, default_id: str = DEFAULT_METHODOLOGY_ID) -> MethodologyRegistry:
    """Build the process-wide registry once at startup, then freeze it."""
    global _registry
    registry = build_builtin_registry(default_id=default_id)
    if community_dir:
        loaded, rejected = load_community_methodologies(registry, community_dir)
        logger.info(f"Community methodologies: {len(loaded)} loaded, {len(rejected)} rejected")
    registry.freeze()
    _registry = registry
    return registry


def reset_registry() -> None:
    """Drop the process-wide registry (tests)."""
    global _registry
    _registry = None
