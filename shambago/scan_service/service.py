"""
Crop scanner placeholder.

No image analysis is performed: after a short delay the scanner
reports a fixed sample result for any non-empty image.
"""

from typing import Callable, Optional

from shambago.common.deferred import DeferredCallbacks
from shambago.common.logger import get_logger
from shambago.config import settings

logger = get_logger(__name__)

SAMPLE_ANALYSIS = """Crop Type: Maize
Health Status: Good
Potential Issues:
- Minor leaf spots detected
- Early signs of nitrogen deficiency

Recommendations:
1. Monitor leaf spots for spread
2. Consider applying nitrogen-rich fertilizer
3. Maintain current watering schedule"""


class CropScanner:
    """
    Delay-then-result scanner bound to one view.
    """

    def __init__(self, delay_seconds: Optional[float] = None):
        self.delay_seconds = (
            settings.SCAN_DELAY_SECONDS if delay_seconds is None else delay_seconds
        )
        self.result: Optional[str] = None
        self._deferred = DeferredCallbacks()

    @property
    def is_analyzing(self) -> bool:
        return self._deferred.pending > 0

    def analyze(
        self,
        image: bytes,
        on_result: Optional[Callable[[str], None]] = None,
    ) -> bool:
        """
        Start analysing an image.

        Must be called from inside a running event loop.

        Returns:
            bool: False if there is no image or the scanner is closed.
        """
        if not image:
            logger.debug("Scan skipped: empty image")
            return False

        if self._deferred.closed:
            logger.warning("Scan requested on closed scanner")
            return False

        logger.info("Crop scan started", extra={"image_bytes": len(image)})

        self.result = None
        self._deferred.cancel_all()
        self._deferred.schedule(self.delay_seconds, self._finish, on_result)
        return True

    def close(self) -> None:
        """Cancel a running scan."""
        self._deferred.cancel_all(close=True)

    def _finish(self, on_result: Optional[Callable[[str], None]]) -> None:
        self.result = SAMPLE_ANALYSIS
        logger.info("Crop scan finished")

        if on_result is not None:
            on_result(self.result)
