"""A simulated callback-style frame decoder, future and iterator bridges to it, and two producer/consumer demos."""

__version__ = "0.1.0"
__all__ = ["decoder", "cache", "ondemand", "cache_demo", "sequence_demo"]