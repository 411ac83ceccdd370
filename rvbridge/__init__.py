"""RV-C CAN bus identifier decoding, frame building and dispatch, a paced send queue and device records."""

__version__ = "0.1.0"