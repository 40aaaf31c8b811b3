# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""logger.py"""
import logging

logger: logging.Logger = logging.getLogger("typedargs")
