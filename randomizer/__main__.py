"""
Randomizer — entry point.

Usage:
    python -m randomizer place layout.json            # print placement JSON
    python -m randomizer place layout.json --seed 7 --spacing 20 --tries 50
    python -m randomizer defaults                     # print effective config
    python -m randomizer serve                        # start web server on :8000
    python -m randomizer serve --port 3000
"""

import json
import logging
import sys
from pathlib import Path

USAGE = (
    "Usage: python -m randomizer place LAYOUT.json [--seed N] [--spacing S] "
    "[--tries T] [--config PATH] [--verbose]\n"
    "       python -m randomizer defaults [--config PATH]\n"
    "       python -m randomizer serve [--port PORT] [--host HOST]"
)


def _option(args, name, convert=str):
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return convert(args[i + 1])
    return None


def _place(args) -> int:
    from randomizer.config import ConfigError, load_config
    from randomizer.placer import (
        LayoutError, Placer, RandomCoordinates, parse_layout, pass_to_dict,
        validate_pass,
    )

    positional = [a for i, a in enumerate(args)
                  if not a.startswith("--")
                  and (i == 0 or args[i - 1] not in ("--seed", "--spacing", "--tries", "--config"))]
    if not positional:
        print(USAGE)
        return 1

    try:
        cfg = load_config(_option(args, "--config")).with_overrides(
            spacing=_option(args, "--spacing", float),
            tries=_option(args, "--tries", int),
        )
        data = json.loads(Path(positional[0]).read_text(encoding="utf-8"))
        layout = parse_layout(data)
        seed = _option(args, "--seed", int)
    except (ConfigError, LayoutError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    placer = Placer(cfg.placement(),
                    coordinates=RandomCoordinates(seed))
    placement = placer.position_all(layout.container, layout.items, layout.obstacles)

    out = pass_to_dict(placement)
    out["violations"] = validate_pass(placement, layout.obstacles)
    print(json.dumps(out, indent=2))
    return 0 if placement.succeeded else 2


def _defaults(args) -> int:
    from randomizer.config import ConfigError, load_config

    try:
        cfg = load_config(_option(args, "--config"))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(json.dumps(cfg.to_dict(), indent=2))
    return 0


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    cmd = args[0] if args else "place"
    rest = args[1:]

    logging.basicConfig(
        level=logging.DEBUG if "--verbose" in rest else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if cmd == "place":
        return _place(rest)
    if cmd == "defaults":
        return _defaults(rest)
    if cmd == "serve":
        port = _option(rest, "--port", int) or 8000
        host = _option(rest, "--host") or "127.0.0.1"

        from randomizer.web.server import main as serve
        serve(host=host, port=port)
        return 0

    print(f"Unknown command: {cmd}")
    print(USAGE)
    return 1


if __name__ == "__main__":
    sys.exit(main())
