__version__ = "0.1.0"
__author__ = "Tulir Asokan <tulir@maunium.net>"
__all__ = [
    "types",
    "widget",
]
