# ddragon/resources.py
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

@dataclass(frozen=True)
class Resource:
    """
    Everything that differs between resource types.

    name        directory name under upload/ and default json stem
    image_url   template for the image base, `{cdn}` and `{version}` are filled in
    data_field  where the entities live in the document (None: the document is the list)
    key_field   id-like field matched by get_by_key (None: the mapping key is the id)
    search_fields  fields the substring search looks at
    image_field    path to the image filename inside an entity
    nested         rune trees: tree icon plus slots -> runes
    """
    name: str
    image_url: str
    data_field: Optional[str] = "data"
    key_field: Optional[str] = None
    name_field: str = "name"
    search_fields: Tuple[str, ...] = ("id", "name")
    image_field: Tuple[str, ...] = ("image", "full")
    expose_key_as: Optional[str] = None
    nested: bool = False

    @property
    def json_filename(self) -> str:
        return f"{self.name}.json"

    def image_base(self, cdn: str, version: str) -> str:
        return self.image_url.format(cdn=cdn, version=version)


CHAMPION = Resource(
    name="champion",
    image_url="{cdn}/{version}/img/champion/",
)

SUMMONER = Resource(
    name="summoner",
    # spells are served from img/spell, not img/summoner
    image_url="{cdn}/{version}/img/spell/",
    key_field="id",
)

ITEM = Resource(
    name="item",
    image_url="{cdn}/{version}/img/item/",
    search_fields=("name",),
    expose_key_as="id",
)

RUNES = Resource(
    name="runesReforged",
    # rune icons are not versioned upstream
    image_url="{cdn}/img/",
    data_field=None,
    key_field="key",
    search_fields=("key", "name"),
    image_field=("icon",),
    nested=True,
)

RESOURCES: Dict[str, Resource] = {r.name: r for r in (CHAMPION, SUMMONER, ITEM, RUNES)}

ALIASES = {
    "champions": "champion",
    "summonerSpell": "summoner",
    "summoners": "summoner",
    "items": "item",
    "runeTree": "runesReforged",
    "rune": "runesReforged",
    "runes": "runesReforged",
}

class UnknownResource(KeyError):
    pass

def get_resource(name: str) -> Resource:
    key = ALIASES.get(name, name)
    if key not in RESOURCES:
        raise UnknownResource(name)
    return RESOURCES[key]
