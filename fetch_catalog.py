# fetch_catalog.py
import argparse
import sys

from ddragon.resources import RESOURCES
from ddragon.service import DataDragon
from ddragon.versions import LANGUAGE_LABELS
from util.logging import setup_logger

log = setup_logger("fetch")

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Warm the local Data Dragon cache for versions x languages.")
    p.add_argument("--resource", action="append", choices=sorted(RESOURCES), help="resource type (repeatable, default: all)")
    p.add_argument("--images", action="store_true", help="also download the image set")
    p.add_argument("-f", "--force", action="store_true", help="re-download images even if present")
    p.add_argument("--versions", type=int, default=0, help="only the N latest versions (0 = all)")
    p.add_argument("--lang", action="append", help="language code (repeatable, default: all)")
    return p.parse_args(argv)

def run(dd: DataDragon, resources, versions, languages, images: bool, force: bool) -> int:
    failures = 0
    for v in versions:
        for lang in languages:
            for name in resources:
                engine = dd.engine(name)
                try:
                    engine.get_dataset(v, lang)
                    if images:
                        n = len(engine.get_images(v, lang, force))
                        log.info(f"{name} {v}/{lang}: document + {n} image(s)")
                    else:
                        log.info(f"{name} {v}/{lang}: document")
                except Exception as e:
                    failures += 1
                    log.error(f"{name} {v}/{lang} failed: {e}")
    return failures

def main(argv=None) -> int:
    args = parse_args(argv)
    dd = DataDragon()
    try:
        return _fetch(dd, args)
    finally:
        dd.close()

def _fetch(dd: DataDragon, args) -> int:
    versions = dd.versions.get_versions()
    if not versions:
        log.error("version list is empty, nothing to fetch")
        return 1
    if args.versions > 0:
        versions = versions[:args.versions]
    languages = args.lang or dd.versions.get_languages() or sorted(LANGUAGE_LABELS)
    resources = args.resource or sorted(RESOURCES)

    log.info(f"{len(resources)} resource(s) x {len(versions)} version(s) x {len(languages)} language(s)"
             f"{' [images]' if args.images else ''}{' [FORCE]' if args.force else ''}")
    failures = run(dd, resources, versions, languages, args.images, args.force)
    log.info(f"done, {failures} failure(s)")
    return 1 if failures else 0

if __name__ == "__main__":
    sys.exit(main())
