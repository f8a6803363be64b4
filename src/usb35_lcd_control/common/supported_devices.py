# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

"""
USB serial numbers reported by supported screens.

To add a screen speaking the same protocol, append its info:
SUPPORTED_DEVICES: list[dict] = [...
    {"serial_number": "...", "name": "...", "width": ..., "height": ...},
    ]
"""

DEFAULT_SERIAL_NUMBER = "USB35INCHIPSV2"

SUPPORTED_DEVICES: list[dict] = [
    {"serial_number": DEFAULT_SERIAL_NUMBER, "name": "3.5\" USB screen", "width": 320, "height": 480},
]


def find_supported_device(serial_number: str):
    for device in SUPPORTED_DEVICES:
        if device["serial_number"] == serial_number:
            return device
    return None
