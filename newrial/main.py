# newrial/main.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from newrial.core.di import register_default_services, container
from newrial.core.events import AmountEdited, ConversionUpdated, Event, EventBus, LanguageChanged
from newrial.config.settings import SettingsManager
from newrial.services.converter_service import ConversionView

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="newrial", description="Old Rial ⇄ new Rial / Qeran converter")
    parser.add_argument("amount", nargs="?", default="", help="Old Rial amount (new Rial with --reverse)")
    parser.add_argument("--reverse", action="store_true",
                        help="Convert new Rial (+ --qeran) back to old Rial")
    parser.add_argument("--qeran", default="", help="Qeran (0..99), used with --reverse")
    parser.add_argument("--lang", choices=("fa", "en"), default=None, help="Output language")
    return parser


def _replay(bus: EventBus, shown: List[ConversionView], evt: Event) -> Optional[ConversionView]:
    """Publish `evt` and return the view it produced, or None if no handler produced one."""
    before = len(shown)
    bus.publish(evt)
    return shown[-1] if len(shown) > before else None


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1) Register default services (bus, settings, converter)
    register_default_services(override=True)
    settings: SettingsManager = container.resolve("settings")
    logging.basicConfig(level=settings.log_level(), format="%(levelname)s %(name)s: %(message)s")

    # 2) Converter subscribes itself to the bus
    container.resolve("converter")
    bus: EventBus = container.resolve("bus")

    shown: List[ConversionView] = []
    bus.subscribe(ConversionUpdated, lambda evt: shown.append(evt.view))

    # 3) Replay the command line as UI events
    if args.lang:
        bus.publish(LanguageChanged(lang=args.lang))
    settings.set_reverse(args.reverse)
    if args.reverse:
        edits = [AmountEdited(field="new", text=args.amount), AmountEdited(field="qeran", text=args.qeran)]
    else:
        edits = [AmountEdited(field="old", text=args.amount)]

    view = None
    for evt in edits:
        view = _replay(bus, shown, evt)
        if view is None:
            logger.error("conversion failed for %s field", evt.field)
            return 1

    print(view.headline)
    print(view.words)
    print(view.toman)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
