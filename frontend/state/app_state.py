from typing import MutableMapping, Optional

from shambago.auth_service.session_manager import SessionManager
from shambago.common.localization import Localizer
from frontend.utils.logger import get_logger

logger = get_logger(__name__)


class AppState:
    """
    Process state shared by all pages.

    Created once in ``frontend.main`` and bound to NiceGUI's persistent
    storage on first use.
    """

    def __init__(self) -> None:
        self.session: Optional[SessionManager] = None
        self.localizer: Optional[Localizer] = None

    @property
    def ready(self) -> bool:
        return self.session is not None

    def init(self, store: MutableMapping[str, str]) -> None:
        if self.ready:
            return

        self.session = SessionManager(store)
        self.session.load()
        self.localizer = Localizer(store)

        logger.info(
            "App state initialised",
            extra={"authenticated": self.session.is_authenticated},
        )

    def teardown(self) -> None:
        if self.session is not None:
            self.session.teardown()

        self.session = None
        self.localizer = None
        logger.info("App state torn down")

    def t(self, key: str) -> str:
        """Translate a UI string in the current language."""
        if self.localizer is None:
            return key
        return self.localizer.translate(key)
