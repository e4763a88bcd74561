"""Command-line interface for docchunker"""
from .chunk_cli import main

__all__ = ['main']
