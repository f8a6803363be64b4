# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb
import argparse
import os
import sys

import yaml

from .common.supported_devices import SUPPORTED_DEVICES
from .device_controller.config import DEVICE_INFO_FILE
from .device_controller.serial_detector import find_ports


def _format_device_string(device: dict):
    name = device.get('name', 'N/A')
    serial_number = device.get('serial_number', 'N/A')
    width = device.get('width', 'N/A')
    height = device.get('height', 'N/A')
    port = device.get('port')
    location = f" on {port}" if port else ""
    return f"{name} (S/N: {serial_number}){location}  →  {width}×{height}"


def create_device_info_file(config_dir, device_info):
    print(f"Configuring device: {_format_device_string(device_info)}")
    os.makedirs(config_dir, exist_ok=True)
    device_info_file = os.path.join(config_dir, DEVICE_INFO_FILE)
    print(f"Saving configuration to : {device_info_file}")
    with open(device_info_file, "w") as f:
        yaml.safe_dump(device_info, f)
    print("Configuration complete.")
    return device_info_file


def print_error_msg():
    error_message = (
        "\n⚠️  No supported USB screen detected.\n\n"
        "Supported devices:\n"
    )

    for device in SUPPORTED_DEVICES:
        error_message += f"  • {_format_device_string(device)}\n"

    error_message += (
        "\n💡 Tips:\n"
        "  - Check that your USB cable is connected.\n"
        "  - Ensure you have permission to access serial ports (dialout group on Linux).\n"
    )

    print(error_message)


def choose_device(devices: list, read=input) -> dict:
    print("\n🔍 Multiple compatible devices found:\n")
    for idx, device in enumerate(devices, start=1):
        print(f"  {idx}) {_format_device_string(device)}")

    while True:
        try:
            selected = int(read(f"\n➡️  Select your device (1–{len(devices)}): "))
        except ValueError:
            print("⚠️  Please enter a number corresponding to a device.\n")
            continue
        if 1 <= selected <= len(devices):
            return devices[selected - 1]
        print("❌ Invalid number. Please select a valid device index.\n")


def select_device(read=input):
    print("Checking for available devices...\n")
    available_devices = find_ports()
    if len(available_devices) == 1:
        print("One Device Found...\n")
        return available_devices[0]
    elif len(available_devices) > 1:
        return choose_device(available_devices, read)
    return None


def main(argv=None):
    parser = argparse.ArgumentParser(description="USB 3.5\" LCD device setup")
    parser.add_argument('--config',
                        required=True,
                        help="Directory where device_info.yaml is written")

    args = parser.parse_args(argv)
    try:
        selected_device = select_device()
        if selected_device:
            create_device_info_file(args.config, selected_device)
            return 0
        print_error_msg()
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
