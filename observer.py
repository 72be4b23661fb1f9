# observer.py
import logging

logger = logging.getLogger(__name__)


class Observer:
    """Observer interface."""

    def update(self, subject):
        raise NotImplementedError("Observer subclasses must implement 'update' method.")


class Subject:
    """Base class for observable objects.

    Observers are kept in registration order and the same observer may be
    registered more than once; it is then notified once per registration.
    """

    def __init__(self):
        self._observers = []

    @property
    def observers(self):
        return tuple(self._observers)

    def register(self, observer: Observer):
        self._observers.append(observer)
        logger.debug(f"Observer registered: {observer!r} on {self!r}")

    def unregister(self, observer: Observer):
        """Removes the first registration of ``observer``, if any."""
        try:
            self._observers.remove(observer)
            logger.debug(f"Observer unregistered: {observer!r} from {self!r}")
        except ValueError:
            pass

    def notify_all(self):
        # Snapshot so an observer may (un)register during the pass.
        for observer in list(self._observers):
            observer.update(self)
