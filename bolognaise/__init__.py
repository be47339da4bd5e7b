"""Grid, buildings, recipes and superpositions for planning factory layouts."""

__version__ = "0.1.0"