import argparse
import logging
import sys
from typing import List, Tuple

from handvolume.config import AppConfig

logger = logging.getLogger(__name__)


def split_args(argv=None) -> Tuple[AppConfig, List[str]]:
    """Свои опции -> AppConfig; всё остальное (например, -style для Qt) возвращается отдельно."""
    parser = argparse.ArgumentParser(description="Control output volume by counting raised fingers")
    parser.add_argument("--camera", type=int, default=0, help="camera index")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=480)
    parser.add_argument("--no-mirror", action="store_true", help="do not mirror the camera image")
    parser.add_argument("--max-level", type=int, default=15, help="maximum output level")
    parser.add_argument("--no-overlay", action="store_true", help="do not draw contour and hull on the preview")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    args, rest = parser.parse_known_args(argv)

    config = AppConfig(
        camera_index=args.camera,
        resolution=(args.width, args.height),
        mirror=not args.no_mirror,
        max_level=args.max_level,
        show_overlay=not args.no_overlay,
        log_level=args.log_level,
    )
    return config, rest


def parse_args(argv=None) -> AppConfig:
    return split_args(argv)[0]


def main(argv=None):
    argv = sys.argv if argv is None else argv
    config, rest = split_args(argv[1:])
    logging.basicConfig(level=getattr(logging, config.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')
    if rest:
        logger.debug("Unrecognized arguments left for Qt: %s", " ".join(rest))

    # Qt подтягиваем только при реальном запуске приложения
    from handvolume.core.core import AppCore

    core = AppCore(argv, config)
    return core.run()


if __name__ == "__main__":
    sys.exit(main())
