"""
FinWell - Streamlit launcher
============================
Run with `streamlit run streamlit_app.py`. The calculators live as flat
modules in backend/, so that directory goes on the import path before
the front end is loaded.
"""

import os
import sys

BACKEND_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "backend")
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import app  # noqa: E402,F401  renders on import
