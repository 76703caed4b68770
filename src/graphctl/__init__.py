"""graphctl — minimum spanning trees and shortest paths from edge lists."""

__version__ = "0.1.0"
