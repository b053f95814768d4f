"""Reference registries used when resolving ``$ref``.

Meta-schemas are always available. Remote documents are only fetched when
network access is allowed; otherwise they resolve to an unknown reference.
"""

from __future__ import annotations

import json
from urllib.request import urlopen

from jsonschema_specifications import REGISTRY as SPECIFICATIONS
from referencing import Registry, Resource
from referencing.exceptions import NoSuchResource
from referencing.jsonschema import DRAFT202012

REMOTE_TIMEOUT_SECONDS = 10


def _refuse_remote(uri: str) -> Resource:
    raise NoSuchResource(ref=uri)


def _retrieve_remote(uri: str) -> Resource:
    with urlopen(uri, timeout=REMOTE_TIMEOUT_SECONDS) as response:
        contents = json.load(response)
    return Resource.from_contents(contents, default_specification=DRAFT202012)


OFFLINE_REGISTRY: Registry = SPECIFICATIONS.combine(Registry(retrieve=_refuse_remote))
ONLINE_REGISTRY: Registry = SPECIFICATIONS.combine(Registry(retrieve=_retrieve_remote))


def registry_for(allow_network: bool) -> Registry:
    return ONLINE_REGISTRY if allow_network else OFFLINE_REGISTRY
