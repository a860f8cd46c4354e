"""web-to-ios: framework detection and Capacitor migration generator."""

__version__ = "0.1.0"
