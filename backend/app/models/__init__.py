from app.models.chat import ModelConfig, Role, Turn
from app.models.integration import IntegrationRecord, ServiceKind

__all__ = [
    "IntegrationRecord",
    "ModelConfig",
    "Role",
    "ServiceKind",
    "Turn",
]
