from plc_history.infrastructure.identity.handle_resolver import HandleResolver

__all__ = ["HandleResolver"]
