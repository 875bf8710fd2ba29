import json

import pytest

from ddragon.config import Settings
from ddragon.errors import FetchFailure
from ddragon.service import DataDragon
from ddragon.versions import VersionProvider

HOST = "https://ddragon.test"
CDN = f"{HOST}/cdn"
VERSIONS = ["15.1.1", "15.1.0", "14.24.1"]
LANGUAGES = ["en_US", "fr_FR"]


class FakeFetcher:
    """Stands in for RemoteFetcher: canned bodies per URL, every call recorded."""

    def __init__(self):
        self.responses = {}
        self.calls = []
        self.closed = False

    def add(self, url, body: bytes):
        self.responses[url] = body

    def add_json(self, url, data):
        self.add(url, json.dumps(data).encode("utf-8"))

    def get(self, url):
        self.calls.append(url)
        if url not in self.responses:
            raise FetchFailure(url, f"GET {url} answered 404", status_code=404)
        return self.responses[url]

    def close(self):
        self.closed = True


def champion_doc(n, prefix="Champ"):
    data = {}
    for i in range(n):
        cid = f"{prefix}{i:03d}"
        data[cid] = {"id": cid, "key": str(i), "name": f"{prefix} {i}", "image": {"full": f"{cid}.png"}}
    return {"type": "champion", "version": VERSIONS[0], "data": data}


def seed_champions(fetcher, n=45, version="15.1.1", lang="en_US"):
    doc = champion_doc(n)
    fetcher.add_json(f"{CDN}/{version}/data/{lang}/champion.json", doc)
    for cid in doc["data"]:
        fetcher.add(f"{CDN}/{version}/img/champion/{cid}.png", f"png:{cid}".encode())
    return doc


SUMMONER_DOC = {
    "type": "summoner",
    "data": {
        "SummonerFlash": {"id": "SummonerFlash", "name": "Flash", "image": {"full": "SummonerFlash.png"}},
        "SummonerHeal": {"id": "SummonerHeal", "name": "Heal", "image": {"full": "SummonerHeal.png"}},
        "SummonerBarrier": {"id": "SummonerBarrier", "name": "Barrier", "image": {"full": "SummonerBarrier.png"}},
        "Placeholder": {"id": "Placeholder", "image": {}},
    },
}

ITEM_DOC = {
    "type": "item",
    "data": {
        "1001": {"name": "Boots", "image": {"full": "1001.png"}},
        "3031": {"name": "Infinity Edge", "image": {"full": "3031.png"}},
        "3089": {"name": "Rabadon's Deathcap", "image": {"full": "3089.png"}},
    },
}

RUNES_DOC = [
    {
        "id": 8100,
        "key": "Domination",
        "name": "Domination",
        "icon": "perk-images/Styles/7200_Domination.png",
        "slots": [
            {"runes": [
                {"id": 8112, "key": "Electrocute", "name": "Electrocute", "icon": "perk-images/Styles/Domination/Electrocute/Electrocute.png"},
                {"id": 8128, "key": "DarkHarvest", "name": "Dark Harvest", "icon": "perk-images/Styles/Domination/DarkHarvest/DarkHarvest.png"},
            ]},
            {"runes": [
                {"id": 8126, "key": "CheapShot", "name": "Cheap Shot", "icon": "perk-images/Styles/Domination/CheapShot/CheapShot.png"},
                {"id": 9999, "key": "NoIcon", "name": "No Icon"},
            ]},
        ],
    },
    {
        "id": 8000,
        "key": "Precision",
        "name": "Precision",
        "icon": "perk-images/Styles/7201_Precision.png",
        "slots": [
            {"runes": [
                {"id": 8005, "key": "PressTheAttack", "name": "Press the Attack", "icon": "perk-images/Styles/Precision/PressTheAttack/PressTheAttack.png"},
            ]},
        ],
    },
]


def seed_summoners(fetcher, version="15.1.1", lang="en_US"):
    fetcher.add_json(f"{CDN}/{version}/data/{lang}/summoner.json", SUMMONER_DOC)
    for sid in ("SummonerFlash", "SummonerHeal", "SummonerBarrier"):
        fetcher.add(f"{CDN}/{version}/img/spell/{sid}.png", f"png:{sid}".encode())


def seed_items(fetcher, version="15.1.1", lang="en_US"):
    fetcher.add_json(f"{CDN}/{version}/data/{lang}/item.json", ITEM_DOC)
    for iid in ITEM_DOC["data"]:
        fetcher.add(f"{CDN}/{version}/img/item/{iid}.png", f"png:{iid}".encode())


def seed_runes(fetcher, version="15.1.1", lang="en_US"):
    fetcher.add_json(f"{CDN}/{version}/data/{lang}/runesReforged.json", RUNES_DOC)
    for tree in RUNES_DOC:
        fetcher.add(f"{CDN}/img/{tree['icon']}", tree["icon"].encode())
        for slot in tree["slots"]:
            for rune in slot["runes"]:
                if "icon" in rune:
                    fetcher.add(f"{CDN}/img/{rune['icon']}", rune["icon"].encode())


@pytest.fixture
def settings(tmp_path):
    return Settings(host=HOST, base_dir=tmp_path)


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def meta_fetcher():
    # version/language lists go through their own fetcher so data/image call counts stay exact
    f = FakeFetcher()
    f.add_json(f"{HOST}/api/versions.json", VERSIONS)
    f.add_json(f"{HOST}/cdn/languages.json", LANGUAGES)
    return f


@pytest.fixture
def versions(meta_fetcher, settings):
    return VersionProvider(meta_fetcher, settings)


@pytest.fixture
def dd(settings, fetcher, versions):
    return DataDragon(settings, fetcher=fetcher, versions=versions)
