"""Abstract base class for alert sinks."""
from abc import ABC, abstractmethod


class AlertSinkABC(ABC):
    """Base interface for anything that can signal a price move to the user.

    play_alert() is called synchronously from the polling loop and may block
    until the alert has had time to be noticed.
    """

    @abstractmethod
    def play_alert(self) -> None:
        """Emit the alert.

        Raises:
            AlertError: If the alert could not be emitted.
        """
