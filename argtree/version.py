# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
__version__ = "0.1.0"
