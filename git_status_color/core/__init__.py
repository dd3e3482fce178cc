"""git_status_color.core — Foundation layer.

Contains the colour types, hex decoder, brightness classifier, escape
sequence emitter and the git identifier source.
This module has NO dependencies on git_status_color.__main__.
Only stdlib and numpy are allowed here.
"""
