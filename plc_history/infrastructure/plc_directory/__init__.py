from plc_history.infrastructure.plc_directory.client import PlcDirectoryClient

__all__ = ["PlcDirectoryClient"]
