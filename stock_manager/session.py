import logging

from .schemas import UserSession

logger = logging.getLogger(__name__)


class SessionGate:
    """
    Captures the user's display name once per session. Nothing is verified and
    there is no logout.
    """

    def __init__(self):
        self.session = UserSession()

    @property
    def logged_in(self) -> bool:
        return self.session.logged_in

    def login(self, first_name: str, last_name: str) -> bool:
        if self.session.logged_in:
            logger.debug("Login ignored, session already started.")
            return False
        if not first_name.strip() or not last_name.strip():
            logger.info("Login skipped, first and last name are both required.")
            return False

        self.session = UserSession(
            first_name=first_name, last_name=last_name, logged_in=True
        )
        logger.info(f"Session started for {self.session.display_name}")
        return True
