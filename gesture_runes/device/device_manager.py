"""
Device management for touchscreen discovery.
"""

import evdev
from evdev import InputDevice, ecodes
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class DeviceManager:
    """Finds a multitouch device usable as a stroke source."""

    def __init__(self, device_path: Optional[str] = None):
        self.device_path = device_path
        self.device = None
        self.width = 0
        self.height = 0

    def find_device(self) -> Optional[InputDevice]:
        """Open the configured device, or the first multitouch one found."""
        if self.device_path:
            candidates = [self.device_path]
        else:
            candidates = evdev.list_devices()

        opened = False
        for path in candidates:
            try:
                device = InputDevice(path)
            except OSError as e:
                logger.warning(f"Could not open {path}: {e}")
                continue
            opened = True
            if self._configure(device):
                self.device = device
                logger.info(f"Found touchscreen: {device.name}")
                logger.info(f"Touch area: {self.width}x{self.height}")
                return device
            device.close()

        if self.device_path:
            if opened:
                logger.error(f"{self.device_path} is not a multitouch device")
        else:
            logger.error("No touchscreen device found")
        return None

    def _configure(self, device: InputDevice) -> bool:
        """Read the touch area from a device; False if it is not multitouch."""
        abs_caps = device.capabilities().get(ecodes.EV_ABS, [])
        abs_info = {code: info for code, info in abs_caps}

        # Multitouch slots are required to follow a single finger
        if ecodes.ABS_MT_SLOT not in abs_info:
            return False

        if ecodes.ABS_MT_POSITION_X in abs_info:
            self.width = abs_info[ecodes.ABS_MT_POSITION_X].max + 1
        if ecodes.ABS_MT_POSITION_Y in abs_info:
            self.height = abs_info[ecodes.ABS_MT_POSITION_Y].max + 1
        return True

    def close(self):
        if self.device:
            self.device.close()
            self.device = None
