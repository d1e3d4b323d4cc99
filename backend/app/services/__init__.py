from app.services.chat_session_service import SessionStore
from app.services.integration_service import IntegrationStore

__all__ = ["SessionStore", "IntegrationStore"]
