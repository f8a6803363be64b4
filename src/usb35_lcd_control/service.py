# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

import argparse
import sys

ORIENTATIONS = {
    'portrait': 'PORTRAIT',
    'reverse-portrait': 'REVERSE_PORTRAIT',
    'landscape': 'LANDSCAPE',
    'reverse-landscape': 'REVERSE_LANDSCAPE',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="USB 3.5\" LCD Control")
    parser.add_argument('--config',
                        help="Directory holding device_config.yaml (port is discovered when omitted)")
    parser.add_argument('--mock',
                        action='store_true',
                        help="Record commands instead of sending them to the screen")

    commands = parser.add_subparsers(dest='command', required=True)
    commands.add_parser('clear', help="Clear the screen to white")
    commands.add_parser('black', help="Clear the screen to black")
    commands.add_parser('on', help="Turn the screen on")
    commands.add_parser('off', help="Turn the screen off, keeping the image")
    commands.add_parser('reset', help="Reset the screen controller")

    brightness = commands.add_parser('brightness', help="Set the backlight level")
    brightness.add_argument('level', type=int, help="0 (darkest) to 255 (brightest)")

    orientation = commands.add_parser('orientation', help="Set the screen orientation")
    orientation.add_argument('orientation', choices=list(ORIENTATIONS))

    draw = commands.add_parser('draw', help="Draw a 320x480 or 480x320 image")
    draw.add_argument('image', help="Path of the image file")
    return parser


def run_command(device, args: argparse.Namespace):
    from usb35_lcd_control.device_controller.display.commands import Orientation

    if args.command == 'clear':
        device.clear()
    elif args.command == 'black':
        device.to_black()
    elif args.command == 'on':
        device.screen_on()
    elif args.command == 'off':
        device.screen_off()
    elif args.command == 'reset':
        device.reset()
    elif args.command == 'brightness':
        device.set_brightness(args.level)
    elif args.command == 'orientation':
        device.set_orientation(Orientation[ORIENTATIONS[args.orientation]])
    elif args.command == 'draw':
        device.draw_file(args.image)


def main(argv=None):
    args = build_parser().parse_args(argv)
    from usb35_lcd_control.common.logging_config import get_service_logger
    from usb35_lcd_control.device_controller import load_device
    from usb35_lcd_control.device_controller.display.errors import ScreenError

    logger = get_service_logger()
    logger.info(f"USB LCD Control running command '{args.command}'")

    try:
        with load_device(args.config, mock=args.mock) as device:
            run_command(device, args)
    except (ScreenError, OSError, ValueError) as e:
        logger.error(f"Command '{args.command}' failed: {e}", exc_info=True)
        return 1
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        return 1

    logger.info(f"Command '{args.command}' done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
