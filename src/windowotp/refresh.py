import logging
import threading
from typing import Callable, Optional

from .candidates import CandidateSet, generate_candidates
from .exceptions import ValidationError
from .secret import SecretLike, as_secret
from .window import now_millis

logger = logging.getLogger(__name__)


class Refresher(object):
    """
    Periodically recomputes the candidate set and hands it to a callback.

    The core functions never schedule anything themselves; a display layer
    that wants codes kept current runs one of these instead.
    """

    def __init__(
        self,
        secret: SecretLike,
        callback: Callable[[CandidateSet], None],
        interval: float = 1.0,
        clock: Callable[[], int] = now_millis,
    ) -> None:
        """
        :param secret: secret as a Secret, a hex string or an integer
        :param callback: receives every freshly computed CandidateSet
        :param interval: seconds between refreshes
        :param clock: returns the current Unix time in milliseconds
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.secret = as_secret(secret)
        self.callback = callback
        self.interval = interval
        self.clock = clock
        self._stopped: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    def tick(self) -> CandidateSet:
        candidates = generate_candidates(self.secret, self.clock())
        self.callback(candidates)
        return candidates

    def start(self) -> None:
        if self.running:
            raise RuntimeError("refresher is already running")
        # one event per run; a thread left behind by a timed-out stop() stays stopped
        self._stopped = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stopped,), name="windowotp-refresh", daemon=True
        )
        self._thread.start()
        logger.debug("Started refreshing every %.3fs", self.interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        if self._stopped is not None:
            self._stopped.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.debug("Stopped refreshing")

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self, stopped: threading.Event) -> None:
        while not stopped.is_set():
            try:
                self.tick()
            except ValidationError:
                logger.error("Cannot compute codes, refresh stopped", exc_info=True)
                stopped.set()
                break
            except Exception:
                logger.exception("Refresh callback failed")
            stopped.wait(self.interval)

    def __enter__(self) -> "Refresher":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
