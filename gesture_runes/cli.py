"""
Command line interface.

    gesture-runes recognize            draw a stroke and run its command
    gesture-runes record --name NAME   draw a stroke and save it as NAME
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config.settings import ConfigError, load_config
from .core.app import RuneApp
from .utils.logger import RuneLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gesture-runes',
        description='Draw a stroke and run the command bound to the closest recorded one.')
    parser.add_argument('-c', '--config', dest='config_path',
                        help='Configuration file (default: $XDG_CONFIG_HOME/gesture-runes/config.json)')
    parser.add_argument('--data-dir',
                        help='Directory of recorded gestures (default: $XDG_DATA_HOME/gesture-runes)')
    parser.add_argument('-b', '--backend', choices=['pygame', 'touch'], default='pygame',
                        help='Stroke source: mouse in a pygame window, or an evdev touchscreen')
    parser.add_argument('--device', help='evdev device path for the touch backend')
    parser.add_argument('--grab', action='store_true',
                        help='Grab the touch device while capturing')
    parser.add_argument('--fullscreen', action='store_true',
                        help='Open the pygame window fullscreen')
    parser.add_argument('--debug-file', help='Append recognition events to this file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log debug output, including the distance to every pattern')

    subparsers = parser.add_subparsers(dest='command', required=True)
    subparsers.add_parser('recognize', help='Recognize a stroke and run its command')
    record = subparsers.add_parser('record', help='Record a new reference stroke')
    record.add_argument('-n', '--name', required=True, help='Pattern name')
    return parser


def create_capture(args):
    """Instantiate the selected stroke source."""
    if args.backend == 'touch':
        from .core.touch_capture import TouchStrokeCapture
        from .device.device_manager import DeviceManager
        return TouchStrokeCapture(DeviceManager(args.device), grab=args.grab)

    from .core.capture import PygameStrokeCapture
    return PygameStrokeCapture(fullscreen=args.fullscreen)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    rune_logger = RuneLogger(args.debug_file)
    try:
        try:
            config = load_config(args.config_path)
        except ConfigError as e:
            rune_logger.log_error(str(e))
            return 2

        app = RuneApp(config, create_capture(args), data_dir=args.data_dir,
                      rune_logger=rune_logger, show_scores=args.verbose)
        if args.command == 'record':
            return app.record(args.name)
        return app.recognize()
    except KeyboardInterrupt:
        rune_logger.log_cancelled()
        return 130
    finally:
        rune_logger.close()


if __name__ == '__main__':
    sys.exit(main())
