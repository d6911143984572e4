"""svg_theme.core — Foundation layer.

Contains the colour codec, type definitions, document adapter, the
extract/validate/build decode path, the encoder, and the report builder.
This module has NO dependencies on svg_theme.commands or svg_theme.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
