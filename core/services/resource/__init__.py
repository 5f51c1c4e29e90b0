from core.services.resource.service import ResourceService

__all__ = ["ResourceService"]
