"""
Scene Engine
============
Scales, aggregation, annotations, tooltip and the scene dispatcher.
Nothing in this package creates widgets; it emits draw commands and state.
"""
