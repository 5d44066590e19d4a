"""
Core functionality for the YouTube transcript server.

This package contains the timestamp codec, the segment preprocessors,
the output format renderers and the pipeline that ties them together,
plus the clients that acquire segments from YouTube.
"""
