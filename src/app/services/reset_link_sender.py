from abc import ABC, abstractmethod


class ResetLinkSender(ABC):
    """Delivers a password reset link out of band (e-mail, message queue)"""

    @abstractmethod
    async def send(self, email: str, link: str) -> None:
        pass
