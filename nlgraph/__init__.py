"""NLGraph: natural language to GraphQL with visualization suggestions."""

__version__ = "0.1.0"
