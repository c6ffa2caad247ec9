"""
The VIEW layer holds the Qt widgets: window chrome and the canvas that
executes draw commands. It reads state only through dispatcher signals.
"""
