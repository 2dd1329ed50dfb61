import os
import sys
import logging
import argparse
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..models.blend_parameters import BlendParameters
from ..models.errors import HybridError
from ..pipeline.hybrid_builder import HybridPipeline, save_result, OUTPUT_DIR, OUTPUT_EXT
from ..pipeline.sources import load_file_sources, render_text_sources

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="hybridize",
        description="Blend the low frequencies of one image with the high frequencies of another.",
    )
    ap.add_argument("--a-blur", type=float, default=None,
                    help="Gaussian sigma of the low-pass image A (default 4.5)")
    ap.add_argument("--b-blur", type=float, default=None,
                    help="sharpen amount of the high-pass image B (default 0.545)")
    ap.add_argument("--c-blur", type=float, default=None,
                    help="sharpen amount of the high-pass image C (default 0.0)")
    ap.add_argument("--out-dir", default=OUTPUT_DIR, help="where stage images are written")
    ap.add_argument("--ext", default=OUTPUT_EXT, help="output file extension, e.g. .png")
    ap.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"))
    ap.add_argument("--no-progress", action="store_true", help="hide the save progress bar")

    sub = ap.add_subparsers(dest="command", required=True)

    file_cmd = sub.add_parser("file", help="hybrid of two same-size image files")
    file_cmd.add_argument("file_a", help="low-frequency image")
    file_cmd.add_argument("file_b", help="high-frequency image")

    text_cmd = sub.add_parser("text", help="hybrid of two or three rendered messages")
    text_cmd.add_argument("msg1")
    text_cmd.add_argument("msg2")
    text_cmd.add_argument("msg3", nargs="?", default=None)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        logger.error("Unknown log level: %s", args.log_level)
        return 1

    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        params = BlendParameters.from_env(
            a_blur=args.a_blur, b_sharpen=args.b_blur, c_sharpen=args.c_blur
        )
        if args.command == "file":
            sources = load_file_sources(args.file_a, args.file_b)
        else:
            sources = render_text_sources(args.msg1, args.msg2, args.msg3)

        result = HybridPipeline().run(sources, params)
        written = save_result(result, out_dir=args.out_dir, ext=args.ext,
                              progress=not args.no_progress)
    except (HybridError, FileNotFoundError, ValueError, OSError) as err:
        logger.error("Hybrid failed: %s", err)
        return 1

    logger.info("Hybrid image: %s", written["t"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
