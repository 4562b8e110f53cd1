class KdpHomeError(OSError):
    """Raised when the KDP home directory cannot be resolved or created."""
