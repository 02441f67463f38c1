__version__ = "0.1.0"

LIBRARY_NAME = "signalfx-client"
