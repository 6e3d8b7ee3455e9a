"""Taskboard - multi-user project and task tracking core"""

__version__ = "0.1.0"
