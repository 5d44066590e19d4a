"""
YouTube Transcript Pro.

This package fetches YouTube transcripts and video metadata, cleans up the
caption segments and renders them as JSON, SRT, WebVTT, CSV or plain text
behind a small set of JSON-RPC tools.
"""

from transcript_pro.config import config

__version__ = config.APP_VERSION
