"""
Searchable entity integrations.

Each entity names its backend resource, the key of the record list in list
responses and the projector producing its options. Controls and record
sources are configured from these specs, never from resource names.
"""

from dataclasses import dataclass

from search_select.core.projector import FieldProjector, Projector
from search_select.errors import UnknownEntityError


@dataclass(frozen=True)
class EntitySpec:
    """
    Integration of one searchable entity type.

    Attributes:
        name: Registry key, e.g. "shop".
        noun: Plural display noun used in control messages.
        resource: Path of the list endpoint relative to the API base URL.
        resource_key: Key of the record list inside the response ``data``.
        projector: Maps a raw record to an Option.
        multiple: Whether fields of this entity select several values.
    """

    name: str
    noun: str
    resource: str
    resource_key: str
    projector: Projector
    multiple: bool = False


ENTITIES: dict[str, EntitySpec] = {
    spec.name: spec
    for spec in (
        EntitySpec("shop", "shops", "shop", "shops", FieldProjector("shopName")),
        EntitySpec("category", "categories", "category", "categories", FieldProjector("name")),
        EntitySpec(
            "vehicle",
            "vehicles",
            "vehicle",
            "vehicles",
            FieldProjector("vehicleNumber"),
            multiple=True,
        ),
        EntitySpec("user", "users", "user", "users", FieldProjector("name")),
    )
}


def get_entity(name: str) -> EntitySpec:
    """Return the registered entity spec."""
    try:
        return ENTITIES[name.lower()]
    except KeyError as exc:
        msg = f"Unknown searchable entity: {name}"
        raise UnknownEntityError(msg) from exc
