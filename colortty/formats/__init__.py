"""Source format parsers, one module per ColorSchemeFormat (see colortty.registry)."""
