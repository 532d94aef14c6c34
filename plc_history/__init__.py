"""PLC operation history: audit log differencer with a small FastAPI surface."""
