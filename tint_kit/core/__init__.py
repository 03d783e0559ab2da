"""tint_kit.core — Foundation layer.

Contains the colour types, string parser, decoder, adjustment and luma
functions, the Pillow adapter, settings and the report builder.
Only stdlib, numpy, and PIL are allowed here.
"""
