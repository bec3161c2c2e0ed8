"""
Stroke capture from a touchscreen through evdev.
"""

import time
import logging
from typing import Dict, List, Optional

from evdev import ecodes

from ..device.device_manager import DeviceManager
from .errors import CaptureError

logger = logging.getLogger(__name__)


class TouchStrokeCapture:
    """Records the path of one finger until it is lifted.

    A second finger touching the screen cancels the capture, as only
    single strokes are recognized.
    """

    def __init__(self, device_manager: Optional[DeviceManager] = None, grab: bool = False):
        self.device_manager = device_manager or DeviceManager()
        self.grab = grab

        self.current_slot = 0
        self.tracked_slot = None
        self.position = {'x': None, 'y': None}
        self.moved = False
        self.path: List[Dict[str, float]] = []
        self.cancelled = False

    def capture(self) -> Optional[List[Dict[str, float]]]:
        """Block until a stroke is finished; None if it was cancelled."""
        device = self.device_manager.device or self.device_manager.find_device()
        if device is None:
            raise CaptureError("No touchscreen found")

        self._reset()
        if self.grab:
            device.grab()
        try:
            for event in device.read_loop():
                if event.type == ecodes.EV_ABS:
                    done = self._handle_abs_event(event)
                    if done:
                        return self._finish()
                elif event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    self._store_position()
        finally:
            if self.grab:
                device.ungrab()
        return None

    def _reset(self):
        self.current_slot = 0
        self.tracked_slot = None
        self.position = {'x': None, 'y': None}
        self.moved = False
        self.path = []
        self.cancelled = False

    def _handle_abs_event(self, ev) -> bool:
        """Handle absolute coordinate events; True once the stroke ends."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            return self._handle_tracking_id(ev.value)
        elif self.current_slot == self.tracked_slot:
            if ev.code == ecodes.ABS_MT_POSITION_X:
                self.position['x'] = ev.value
                self.moved = True
            elif ev.code == ecodes.ABS_MT_POSITION_Y:
                self.position['y'] = ev.value
                self.moved = True
        return False

    def _handle_tracking_id(self, value: int) -> bool:
        if value == -1:
            # Finger lifted
            return self.current_slot == self.tracked_slot

        if self.tracked_slot is None:
            self.tracked_slot = self.current_slot
            return False

        logger.info("Second finger placed, cancelling stroke")
        self.cancelled = True
        return True

    def _store_position(self):
        if not self.moved or self.position['x'] is None or self.position['y'] is None:
            return
        self.path.append({
            'x': float(self.position['x']),
            'y': float(self.position['y']),
            't': time.time()
        })
        self.moved = False

    def _finish(self) -> Optional[List[Dict[str, float]]]:
        if self.cancelled:
            return None
        self._store_position()
        if not self.path:
            return None
        return self.path
