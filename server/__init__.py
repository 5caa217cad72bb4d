"""
Flask endpoint exposing the importer over HTTP
"""
from .ganttpro_endpoint import app, run_server

__all__ = ['app', 'run_server']
