from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from cutviz.logging_config import setup_logging
from cutviz.pages.pages import PAGE_KINDS, create_page
from cutviz.render2d.mpl_surface import export_png
from cutviz.views.view_constants import WINDOW_SIZE

logger = logging.getLogger("cutviz.main")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Interactive viewer for triangle cutting geometry")
    ap.add_argument("--page", choices=sorted(PAGE_KINDS), default="basic", help="Page to show first (default: basic)")
    ap.add_argument("--export", metavar="PATH", help="Render the page to a PNG and exit without opening a window")
    ap.add_argument("--width", type=int, default=WINDOW_SIZE[0], help="Export width in pixels")
    ap.add_argument("--height", type=int, default=WINDOW_SIZE[1], help="Export height in pixels")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: INFO)")
    ap.add_argument("--log-file", metavar="PATH", help="Also write the log to this file")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.export:
        if args.width <= 0 or args.height <= 0:
            print(f"Export size must be positive, got {args.width}x{args.height}", file=sys.stderr)
            return 2
        page = create_page(args.page)
        try:
            export_png(page.display_list, args.export, args.width, args.height)
        except OSError as e:
            print(f"Failed to export {args.export}: {e}", file=sys.stderr)
            return 1
        logger.info("Exported page %s to %s", args.page, args.export)
        return 0

    # Tk is only needed when a window is opened
    from cutviz.views.view_app import AppView

    app = AppView(initial_page=args.page)
    app.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
