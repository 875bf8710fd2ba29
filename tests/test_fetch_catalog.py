import fetch_catalog
from conftest import seed_champions


def test_run_warms_cache_and_counts_failures(dd, fetcher, settings):
    seed_champions(fetcher, n=3, version="15.1.1", lang="en_US")
    failures = fetch_catalog.run(dd, ["champion"], ["15.1.1"], ["en_US", "fr_FR"], images=True, force=False)
    # fr_FR was never published upstream for this fake
    assert failures == 1
    assert (settings.base_dir / "upload/15.1.1/en_US/champion/champion.json").is_file()
    assert (settings.base_dir / "upload/15.1.1/champion_img/Champ002.png").is_file()


def test_parse_args_defaults():
    args = fetch_catalog.parse_args([])
    assert (args.resource, args.images, args.force, args.versions, args.lang) == (None, False, False, 0, None)
    args = fetch_catalog.parse_args(["--resource", "item", "--resource", "summoner", "--images", "--lang", "fr_FR"])
    assert args.resource == ["item", "summoner"]
    assert args.lang == ["fr_FR"]


def test_main_closes_the_http_client(dd, fetcher, settings, monkeypatch):
    seed_champions(fetcher, n=2)
    monkeypatch.setattr(fetch_catalog, "DataDragon", lambda: dd)
    code = fetch_catalog.main(["--resource", "champion", "--versions", "1", "--lang", "en_US"])
    assert code == 0
    assert fetcher.closed
    assert (settings.base_dir / "upload/15.1.1/en_US/champion/champion.json").is_file()


def test_main_closes_even_without_versions(dd, fetcher, versions, monkeypatch):
    monkeypatch.setattr(versions, "get_versions", lambda: [])
    monkeypatch.setattr(fetch_catalog, "DataDragon", lambda: dd)
    assert fetch_catalog.main([]) == 1
    assert fetcher.closed
