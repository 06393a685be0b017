"""
RMS CLI - Command-line interface for the random menu selector.

Usage:
    rms-cli pick
    rms-cli --catalog zones_kr --seed 7 pick --count 3
    rms-cli list-zones
    rms-cli list-catalogs
    rms-cli shell
"""

__version__ = "1.0.0"
