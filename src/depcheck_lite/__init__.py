"""depcheck-lite - find unused dependencies in JavaScript and TypeScript projects."""

__version__ = "0.1.0"
