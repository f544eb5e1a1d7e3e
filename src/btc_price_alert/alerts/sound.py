"""Audible alert sink backed by the pygame mixer."""
import logging
import os
import time
from pathlib import Path

# Silence pygame's import banner; must be set before the import.
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from btc_price_alert.alerts.alert_sink_abc import AlertSinkABC
from btc_price_alert.providers.core import AlertError

logger = logging.getLogger(__name__)

DEFAULT_ALERT_SOUND = Path(__file__).resolve().parent.parent / "assets" / "alert.wav"


class SoundAlert(AlertSinkABC):
    """Plays a local audio file on the default output device.

    Playback blocks for a fixed duration rather than the clip's real length,
    then the mixer is shut down so the device is only held while alerting.
    """

    def __init__(
        self,
        sound_path: Path | str = DEFAULT_ALERT_SOUND,
        duration_seconds: float = 1.0,
    ) -> None:
        """Initialize the sink.

        Args:
            sound_path: Audio file to play (any format the pygame mixer decodes).
            duration_seconds: How long to block while the sound plays.
        """
        self._sound_path = Path(sound_path)
        self._duration = duration_seconds

    @property
    def sound_path(self) -> Path:
        return self._sound_path

    def play_alert(self) -> None:
        """Open, decode and play the alert sound, then wait duration_seconds."""
        if not self._sound_path.is_file():
            raise AlertError(f"Alert sound not found: {self._sound_path}")
        try:
            pygame.mixer.init()
        except pygame.error as e:
            raise AlertError(f"Could not open audio output device: {e}") from e
        try:
            try:
                sound = pygame.mixer.Sound(str(self._sound_path))
            except (pygame.error, OSError) as e:
                raise AlertError(f"Could not decode {self._sound_path}: {e}") from e
            sound.play()
            logger.debug("Playing %s for %.1fs", self._sound_path, self._duration)
            time.sleep(self._duration)
        finally:
            pygame.mixer.quit()
