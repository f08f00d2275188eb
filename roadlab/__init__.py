"""Grid boards, A* path search, an elevator controller and a threaded traffic simulation."""

__version__ = "0.1.0"