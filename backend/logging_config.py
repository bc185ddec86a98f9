#!/usr/bin/env python3
"""
Logging configuration
"""
import logging
import sys


def setup_logging(log_level='INFO'):
    """Setup basic logging to stdout"""
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    return logging.getLogger()
