"""Model of an OSEK/AUTOSAR OS resource manager and its supporting definitions."""

__version__ = "0.1.0"
__all__ = ["types", "queue", "services", "syslog", "callevel", "resource"]