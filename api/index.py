"""
Vercel entry point: exposes the converter's Flask app
"""
import os
import sys

# Converter modules live in the repository root, one level up
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from unicode_converter import app  # noqa: E402,F401
