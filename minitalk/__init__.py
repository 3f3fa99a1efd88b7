"""Exchange text between processes through SIGUSR1/SIGUSR2 bit signalling."""

__version__ = "1.0.0"
__all__ = ["ftprintf", "protocol", "client", "server"]