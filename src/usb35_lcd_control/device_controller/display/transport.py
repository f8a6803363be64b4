# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

from abc import ABC, abstractmethod
from typing import List, Optional

import serial

from .commands import REGION_FRAME_SIZE, decode_region_command
from .errors import ScreenConnectionError
from ..config import SerialConfig
from ...common.logging_config import get_service_logger


class Transport(ABC):
    """Write-only byte channel to the screen. Must already be open."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        pass

    def close(self):
        pass


class SerialTransport(Transport):

    def __init__(self, port: serial.Serial):
        self.port = port

    def __str__(self):
        return f"SerialTransport(port={self.port.port}, baudrate={self.port.baudrate})"

    @classmethod
    def open(cls, port_name: str, config: Optional[SerialConfig] = None) -> "SerialTransport":
        config = config or SerialConfig()
        logger = get_service_logger()
        try:
            port = serial.Serial(port_name, baudrate=config.baudrate, timeout=config.timeout,
                                 write_timeout=config.timeout)
        except (serial.SerialException, OSError, ValueError) as e:
            raise ScreenConnectionError(f"Failed to open {port_name}: {e}") from e
        logger.info(f"Opened {port_name} at {config.baudrate} baud")
        return cls(port)

    def write(self, data: bytes) -> int:
        return self.port.write(data)

    def close(self):
        if self.port.is_open:
            try:
                self.port.close()
            except (serial.SerialException, OSError) as e:
                raise ScreenConnectionError(f"Failed to close {self.port.port}: {e}") from e


class MockTransport(Transport):
    """
    Records every write instead of sending it.
    With fail_on=N the Nth write (1-based) raises SerialException.
    """

    def __init__(self, fail_on: Optional[int] = None):
        self.fail_on = fail_on
        self.writes: List[bytes] = []
        self.calls = 0
        self.closed = False
        self.logger = get_service_logger()

    def write(self, data: bytes) -> int:
        self.calls += 1
        if self.fail_on is not None and self.calls == self.fail_on:
            raise serial.SerialException(f"[MOCK] write {self.calls} failed")
        self.writes.append(bytes(data))
        if len(data) == REGION_FRAME_SIZE:
            self.logger.debug(f"[MOCK] {decode_region_command(data)}")
        else:
            self.logger.debug(f"[MOCK] Wrote {len(data)} bytes")
        return len(data)

    def close(self):
        self.closed = True
        self.logger.info(f"[MOCK] Closed after {len(self.writes)} writes "
                         f"({sum(len(w) for w in self.writes)} bytes)")
